"""
Unit test fixtures: factory-built models.
"""

import pytest

from core.models import AppUser, UserRole
from config import MapConfig
from tests.factories.model_factories import (
    make_user,
    make_step1_draft,
    make_full_draft,
)


@pytest.fixture
def superadmin():
    return AppUser(**make_user(role=UserRole.SUPERADMIN))


@pytest.fixture
def viewer():
    return AppUser(**make_user(role=UserRole.VIEWER))


@pytest.fixture(params=[UserRole.ADMIN, UserRole.VERIFIKATOR], ids=["admin", "verifikator"])
def staff(request):
    """Village-scoped staff user (Admin and Verifikator) assigned to village 7."""
    return AppUser(**make_user(role=request.param, assigned_village_id=7))


@pytest.fixture(params=[UserRole.ADMIN, UserRole.VERIFIKATOR], ids=["admin", "verifikator"])
def unassigned_staff(request):
    """Village-scoped staff user without a village assignment."""
    return AppUser(**make_user(role=request.param, assigned_village_id=None))


@pytest.fixture
def step1_draft_data():
    """Return randomized step-1-only draft data dict."""
    return make_step1_draft()


@pytest.fixture
def full_draft_data():
    """Return randomized fully issued draft data dict."""
    return make_full_draft()


@pytest.fixture
def map_config():
    """Map configuration with an API key and default styling."""
    return MapConfig(api_key="test-key-0000000000000000")

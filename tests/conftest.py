"""
Root conftest.py: sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without a map API key or any other deployment configuration.
"""

import os
import sys
from datetime import date

import pytest

# Add project root to sys.path so 'core', 'services', 'config', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True, scope="session")
def set_minimal_env_vars():
    """
    Set minimal environment variables for a predictable configuration.

    The map API key is deliberately removed so no test can build a real
    map URL by accident; tests that need one pass a MapConfig explicitly.
    """
    defaults = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "INFO",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)
    os.environ.pop("GOOGLE_MAPS_API_KEY", None)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached configuration around every test."""
    from config import reset_config
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fixed_today():
    """A fixed calendar date for statement-date tests."""
    return date(2025, 3, 14)

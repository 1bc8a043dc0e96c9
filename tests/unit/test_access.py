"""
Access scoping tests.

Tests role dispatch, the village-assignment precondition, and the
NotFound conflation of the assert_* functions.
"""

import logging

import pytest

from core.logic.access import (
    is_superadmin,
    is_viewer,
    is_privileged_processor,
    require_assigned_village_id,
    get_submission_scope_for_user,
    can_access_draft,
    can_access_submission,
    assert_can_access_draft,
    assert_can_access_submission,
)
from core.models import AppUser, DraftAccessRecord, SubmissionAccessRecord, UserRole
from exceptions import ForbiddenError, ResourceNotFoundError
from tests.factories.model_factories import (
    make_user,
    make_draft_access,
    make_submission_access,
)


# ============================================================================
# ROLE PREDICATES
# ============================================================================

class TestRolePredicates:

    @pytest.mark.parametrize("role,expected", [
        (UserRole.SUPERADMIN, (True, False, False)),
        (UserRole.VIEWER, (False, True, False)),
        (UserRole.ADMIN, (False, False, True)),
        (UserRole.VERIFIKATOR, (False, False, True)),
    ], ids=["superadmin", "viewer", "admin", "verifikator"])
    def test_predicates(self, role, expected):
        user = AppUser(**make_user(role=role, assigned_village_id=3))
        assert (is_superadmin(user), is_viewer(user), is_privileged_processor(user)) == expected

    def test_role_accepts_legacy_peran_key(self):
        user = AppUser.model_validate({"id": 5, "peran": "Admin", "assignedVillageId": 2})
        assert user.role == UserRole.ADMIN
        assert user.assigned_village_id == 2


# ============================================================================
# VILLAGE ASSIGNMENT
# ============================================================================

class TestRequireAssignedVillageId:

    def test_returns_assigned_village(self, staff):
        assert require_assigned_village_id(staff) == 7

    def test_unassigned_staff_forbidden(self, unassigned_staff):
        with pytest.raises(ForbiddenError) as exc_info:
            require_assigned_village_id(unassigned_staff)
        assert "ditetapkan ke desa" in exc_info.value.message

    def test_zero_village_treated_as_unassigned(self):
        user = AppUser(**make_user(role=UserRole.ADMIN, assigned_village_id=0))
        with pytest.raises(ForbiddenError):
            require_assigned_village_id(user)

    @pytest.mark.parametrize("role", [UserRole.SUPERADMIN, UserRole.VIEWER], ids=["superadmin", "viewer"])
    def test_roles_without_village_scope_forbidden(self, role):
        user = AppUser(**make_user(role=role, assigned_village_id=7))
        with pytest.raises(ForbiddenError):
            require_assigned_village_id(user)


# ============================================================================
# SUBMISSION SCOPE
# ============================================================================

class TestSubmissionScope:

    def test_superadmin_unrestricted(self, superadmin):
        scope = get_submission_scope_for_user(superadmin)
        assert scope.is_unrestricted
        assert scope.as_filter() == {}

    def test_viewer_scoped_to_owner(self, viewer):
        scope = get_submission_scope_for_user(viewer)
        assert scope.as_filter() == {"owner_user_id": viewer.id}

    def test_staff_scoped_to_village(self, staff):
        scope = get_submission_scope_for_user(staff)
        assert scope.as_filter() == {"village_id": 7}

    def test_unassigned_staff_forbidden(self, unassigned_staff):
        with pytest.raises(ForbiddenError):
            get_submission_scope_for_user(unassigned_staff)


# ============================================================================
# DRAFT ACCESS
# ============================================================================

class TestDraftAccess:

    def test_superadmin_sees_any_draft(self, superadmin):
        draft = DraftAccessRecord(**make_draft_access(village_id=None))
        assert can_access_draft(superadmin, draft) is True

    def test_viewer_sees_own_draft(self, viewer):
        draft = DraftAccessRecord(**make_draft_access(user_id=viewer.id, village_id=99))
        assert can_access_draft(viewer, draft) is True

    def test_viewer_denied_foreign_draft(self, viewer):
        draft = DraftAccessRecord(**make_draft_access(user_id=viewer.id + 1, village_id=99))
        assert can_access_draft(viewer, draft) is False

    def test_owner_always_sees_own_draft(self, staff):
        # Own draft in a different village is still visible
        draft = DraftAccessRecord(**make_draft_access(user_id=staff.id, village_id=123))
        assert can_access_draft(staff, draft) is True

    def test_staff_sees_draft_in_assigned_village(self, staff):
        draft = DraftAccessRecord(**make_draft_access(user_id=staff.id + 1, village_id=7))
        assert can_access_draft(staff, draft) is True

    def test_staff_denied_draft_in_other_village(self, staff):
        draft = DraftAccessRecord(**make_draft_access(user_id=staff.id + 1, village_id=8))
        assert can_access_draft(staff, draft) is False

    def test_null_village_draft_invisible_to_other_staff(self, staff):
        draft = DraftAccessRecord(**make_draft_access(user_id=staff.id + 1, village_id=None))
        assert can_access_draft(staff, draft) is False

    def test_unassigned_staff_forbidden_even_for_own_draft(self, unassigned_staff):
        draft = DraftAccessRecord(**make_draft_access(user_id=unassigned_staff.id, village_id=None))
        with pytest.raises(ForbiddenError):
            can_access_draft(unassigned_staff, draft)

    def test_assert_raises_not_found_on_denial(self, viewer):
        draft = DraftAccessRecord(**make_draft_access(user_id=viewer.id + 1))
        with pytest.raises(ResourceNotFoundError) as exc_info:
            assert_can_access_draft(viewer, draft)
        assert exc_info.value.message == "Draft tidak ditemukan"

    def test_assert_passes_on_access(self, viewer):
        draft = DraftAccessRecord(**make_draft_access(user_id=viewer.id))
        assert assert_can_access_draft(viewer, draft) is None

    def test_assert_propagates_forbidden(self, unassigned_staff):
        draft = DraftAccessRecord(**make_draft_access(village_id=1))
        with pytest.raises(ForbiddenError):
            assert_can_access_draft(unassigned_staff, draft)

    def test_denial_logged_at_warning(self, viewer, caplog):
        draft = DraftAccessRecord(**make_draft_access(user_id=viewer.id + 1))
        with caplog.at_level(logging.WARNING):
            with pytest.raises(ResourceNotFoundError):
                assert_can_access_draft(viewer, draft)
        assert any("Draft access denied" in r.getMessage() for r in caplog.records)


# ============================================================================
# SUBMISSION ACCESS
# ============================================================================

class TestSubmissionAccess:

    def test_superadmin_sees_any_submission(self, superadmin):
        submission = SubmissionAccessRecord(**make_submission_access())
        assert can_access_submission(superadmin, submission) is True

    def test_viewer_sees_own_submission(self, viewer):
        submission = SubmissionAccessRecord(**make_submission_access(owner_user_id=viewer.id))
        assert can_access_submission(viewer, submission) is True

    def test_viewer_denied_unowned_submission(self, viewer):
        submission = SubmissionAccessRecord(**make_submission_access(owner_user_id=None))
        assert can_access_submission(viewer, submission) is False

    def test_staff_sees_submission_in_village(self, staff):
        submission = SubmissionAccessRecord(**make_submission_access(village_id=7))
        assert can_access_submission(staff, submission) is True

    def test_staff_has_no_ownership_bypass(self, staff):
        submission = SubmissionAccessRecord(**make_submission_access(owner_user_id=staff.id, village_id=8))
        assert can_access_submission(staff, submission) is False

    def test_unassigned_staff_forbidden(self, unassigned_staff):
        submission = SubmissionAccessRecord(**make_submission_access(owner_user_id=unassigned_staff.id))
        with pytest.raises(ForbiddenError):
            can_access_submission(unassigned_staff, submission)

    def test_assert_raises_not_found_on_denial(self, staff):
        submission = SubmissionAccessRecord(**make_submission_access(village_id=8))
        with pytest.raises(ResourceNotFoundError) as exc_info:
            assert_can_access_submission(staff, submission)
        assert exc_info.value.message == "Pengajuan tidak ditemukan"

    def test_assert_propagates_forbidden(self, unassigned_staff):
        submission = SubmissionAccessRecord(**make_submission_access(village_id=7))
        with pytest.raises(ForbiddenError):
            assert_can_access_submission(unassigned_staff, submission)

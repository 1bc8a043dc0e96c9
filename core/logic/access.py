# ============================================================================
# ACCESS SCOPING ENGINE
# ============================================================================
# STATUS: Core - Role-based record visibility
# PURPOSE: Decide which drafts/submissions a user may read or act on
# EXPORTS: is_superadmin, is_viewer, is_privileged_processor,
#          require_assigned_village_id, get_submission_scope_for_user,
#          can_access_draft, can_access_submission,
#          assert_can_access_draft, assert_can_access_submission
# DEPENDENCIES: core.models, exceptions, util_logger
# ============================================================================
"""
Access Scoping Engine.

Rules:
    - Superadmin sees everything.
    - Viewer (applicant) sees only records they own.
    - Admin/Verifikator see records in their assigned village, plus drafts
      they own. Staff without an assigned village are refused outright,
      even for their own drafts.

ForbiddenError is raised only by require_assigned_village_id and
propagates unchanged from every function that calls it.
ResourceNotFoundError is raised only by the assert_* functions so a denied
record looks exactly like a missing one.

Exports:
    is_superadmin, is_viewer, is_privileged_processor: Role predicates
    require_assigned_village_id: Single enforcement point for village assignment
    get_submission_scope_for_user: Listing restriction for a user
    can_access_draft, can_access_submission: Visibility checks
    assert_can_access_draft, assert_can_access_submission: Checks that raise NotFound
"""

from ..models.enums import UserRole
from ..models.user import AppUser, DraftAccessRecord, SubmissionAccessRecord, SubmissionScope
from exceptions import ContractViolationError, ForbiddenError, ResourceNotFoundError
from util_logger import LoggerFactory, ComponentType, LogContext

logger = LoggerFactory.create_logger(ComponentType.POLICY, "AccessScoping")

DRAFT_NOT_FOUND_MESSAGE = "Draft tidak ditemukan"
SUBMISSION_NOT_FOUND_MESSAGE = "Pengajuan tidak ditemukan"

_NO_VILLAGE_SCOPE_MESSAGE = "Peran ini tidak memiliki cakupan desa terbatas."
_VILLAGE_NOT_ASSIGNED_MESSAGE = "Admin/Verifikator harus ditetapkan ke desa sebelum mengakses pengajuan."


# ============================================================================
# ROLE PREDICATES
# ============================================================================

def is_superadmin(user: AppUser) -> bool:
    return user.role == UserRole.SUPERADMIN


def is_viewer(user: AppUser) -> bool:
    return user.role == UserRole.VIEWER


def is_privileged_processor(user: AppUser) -> bool:
    """True for village-scoped staff (Admin, Verifikator)."""
    return user.role in (UserRole.ADMIN, UserRole.VERIFIKATOR)


def _actor(user: AppUser) -> dict:
    return LogContext(user_id=user.id, role=user.role.value, village_id=user.assigned_village_id).to_dict()


def _unhandled_role(user: AppUser) -> ContractViolationError:
    return ContractViolationError(f"Unhandled user role: {user.role!r}")


# ============================================================================
# VILLAGE ASSIGNMENT
# ============================================================================

def require_assigned_village_id(user: AppUser) -> int:
    """
    Return the village a staff user is restricted to.

    Args:
        user: Authenticated user

    Returns:
        The user's assigned village id

    Raises:
        ForbiddenError: If the role is not Admin/Verifikator, or the user
            has no assigned village (None or 0)
    """
    if not is_privileged_processor(user):
        logger.warning(
            "Village scope requested for a role without one",
            extra={'custom_dimensions': _actor(user)}
        )
        raise ForbiddenError(_NO_VILLAGE_SCOPE_MESSAGE)

    if not user.assigned_village_id:
        logger.warning(
            "Staff user has no assigned village",
            extra={'custom_dimensions': _actor(user)}
        )
        raise ForbiddenError(_VILLAGE_NOT_ASSIGNED_MESSAGE)

    return user.assigned_village_id


# ============================================================================
# SCOPE & VISIBILITY
# ============================================================================

def get_submission_scope_for_user(user: AppUser) -> SubmissionScope:
    """
    Restriction a submission listing query must apply for this user.

    Args:
        user: Authenticated user

    Returns:
        Empty scope for Superadmin, owner scope for Viewer,
        village scope for Admin/Verifikator

    Raises:
        ForbiddenError: Staff user without an assigned village
    """
    if is_superadmin(user):
        return SubmissionScope()
    elif is_viewer(user):
        return SubmissionScope(owner_user_id=user.id)
    elif is_privileged_processor(user):
        return SubmissionScope(village_id=require_assigned_village_id(user))
    raise _unhandled_role(user)


def can_access_draft(user: AppUser, draft: DraftAccessRecord) -> bool:
    """
    Check whether a user may see a draft.

    A draft with no village yet is visible only to its owner and to
    Superadmin. For staff the village assignment is checked before the
    ownership shortcut, so an unassigned Admin cannot open even their own
    draft.

    Raises:
        ForbiddenError: Staff user without an assigned village
    """
    if is_superadmin(user):
        return True
    elif is_viewer(user):
        return draft.user_id == user.id
    elif is_privileged_processor(user):
        village_id = require_assigned_village_id(user)
        if draft.user_id == user.id:
            return True
        return draft.village_id is not None and draft.village_id == village_id
    raise _unhandled_role(user)


def can_access_submission(user: AppUser, submission: SubmissionAccessRecord) -> bool:
    """
    Check whether a user may see a submission.

    Staff have no ownership bypass here: the submission's village decides.

    Raises:
        ForbiddenError: Staff user without an assigned village
    """
    if is_superadmin(user):
        return True
    elif is_viewer(user):
        return submission.owner_user_id is not None and submission.owner_user_id == user.id
    elif is_privileged_processor(user):
        return submission.village_id == require_assigned_village_id(user)
    raise _unhandled_role(user)


# ============================================================================
# ASSERTIONS
# ============================================================================

def assert_can_access_draft(user: AppUser, draft: DraftAccessRecord) -> None:
    """
    Raise ResourceNotFoundError if the user may not see the draft.

    Raises:
        ForbiddenError: Staff user without an assigned village
        ResourceNotFoundError: Access denied
    """
    if not can_access_draft(user, draft):
        logger.warning(
            "Draft access denied",
            extra={'custom_dimensions': {
                **_actor(user),
                'draft_owner_id': draft.user_id,
                'draft_village_id': draft.village_id
            }}
        )
        raise ResourceNotFoundError(DRAFT_NOT_FOUND_MESSAGE)


def assert_can_access_submission(user: AppUser, submission: SubmissionAccessRecord) -> None:
    """
    Raise ResourceNotFoundError if the user may not see the submission.

    Raises:
        ForbiddenError: Staff user without an assigned village
        ResourceNotFoundError: Access denied
    """
    if not can_access_submission(user, submission):
        logger.warning(
            "Submission access denied",
            extra={'custom_dimensions': {
                **_actor(user),
                'submission_village_id': submission.village_id
            }}
        )
        raise ResourceNotFoundError(SUBMISSION_NOT_FOUND_MESSAGE)

# ============================================================================
# EXCEPTIONS
# ============================================================================
# STATUS: Shared - used by every layer
# PURPOSE: Custom exception hierarchy for distinguishing contract violations from business failures
# EXPORTS: ContractViolationError, BusinessLogicError, ForbiddenError, ResourceNotFoundError
# DEPENDENCIES: core.errors (ErrorCode only)
# ============================================================================

"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Business Logic Failures (expected runtime issues)

The governance core raises only two business failures:
- ForbiddenError: a staff role has no village assignment
- ResourceNotFoundError: access denied, reported as "does not exist"

Both are recoverable by the caller and never fatal to the process.
"""

from core.errors import ErrorCode


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate:
    - Wrong types passed to functions
    - Enum members not handled by a dispatch (e.g. a new UserRole)

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the code.
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime business logic failures.

    These are normal failures that occur during system operation
    and should be handled gracefully without crashing.

    Subclasses represent specific categories of business failures.
    """

    error_code: ErrorCode = ErrorCode.UNEXPECTED_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ForbiddenError(BusinessLogicError):
    """
    Caller's role cannot perform a village-scoped operation.

    Raised exactly once in the codebase, by
    core.logic.access.require_assigned_village_id, and propagated
    unchanged by everything that calls it.

    Examples:
        - Admin/Verifikator not yet assigned to a village
        - Superadmin/Viewer asking for a village-restricted scope
    """

    error_code = ErrorCode.FORBIDDEN


class ResourceNotFoundError(BusinessLogicError):
    """
    Requested resource does not exist.

    Also raised when the caller may not see the resource, so that the
    response is indistinguishable from a missing record.

    Examples:
        - Draft owned by another applicant
        - Submission in another village
    """

    error_code = ErrorCode.RESOURCE_NOT_FOUND

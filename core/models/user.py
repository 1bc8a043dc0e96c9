"""
User and Access Record Models.

Minimal records the access scoping engine decides over. The identity
provider supplies AppUser; the persistence layer supplies the access
records.

Exports:
    AppUser: Authenticated user with role and village assignment
    DraftAccessRecord: Ownership view of an in-progress draft
    SubmissionAccessRecord: Ownership view of a filed submission
    SubmissionScope: Restriction a listing query must apply
"""

from typing import Optional, Dict, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import UserRole


class AppUser(BaseModel):
    """
    Authenticated user as supplied by the identity provider.

    Admin/Verifikator users must have assigned_village_id set before any
    village-scoped operation; this is enforced by
    core.logic.access.require_assigned_village_id, not by this model.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    role: UserRole = Field(..., validation_alias=AliasChoices("role", "peran"))
    assigned_village_id: Optional[int] = None
    nama: Optional[str] = None
    email: Optional[str] = None


class DraftAccessRecord(BaseModel):
    """Draft ownership; village_id stays None until the applicant picks a village."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    user_id: int
    village_id: Optional[int] = None


class SubmissionAccessRecord(BaseModel):
    """Submission ownership; the village is fixed once the submission exists."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    owner_user_id: Optional[int] = None
    village_id: int


class SubmissionScope(BaseModel):
    """
    Restriction for a submission listing query.

    An empty scope (both fields None) means unrestricted.
    """

    model_config = ConfigDict(frozen=True)

    owner_user_id: Optional[int] = None
    village_id: Optional[int] = None

    @property
    def is_unrestricted(self) -> bool:
        return self.owner_user_id is None and self.village_id is None

    def as_filter(self) -> Dict[str, Any]:
        """Column filters to AND into the listing query (only the set ones)."""
        return self.model_dump(exclude_none=True)

"""
Dashboard Filter Models.

Exports:
    DashboardFilters: Canonical, always fully populated list filter
    DashboardFilterPatch: Partial update applied to the current query parameters
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DashboardFilters(BaseModel):
    """
    Canonical submission list filter.

    Every field is a string; empty means "not filtered" except `status`,
    whose unfiltered value is 'all'. When both dates are set,
    date_from <= date_to.

    `kecamatan` is the legacy free-text region filter, superseded by `desa_id`.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    search: str = ""
    status: str = "all"
    desa_id: str = ""
    kecamatan: str = ""
    date_from: str = ""
    date_to: str = ""


class DashboardFilterPatch(BaseModel):
    """Fields to change; None means "leave as is"."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    search: Optional[str] = None
    status: Optional[str] = None
    desa_id: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None

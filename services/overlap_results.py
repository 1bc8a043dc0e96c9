"""
Overlap Result Normalizer.

Validates rows returned by the spatial overlap query (parcel polygon against
prohibited areas and other submissions) and converts them to typed results.

Rows come from the persistence layer with snake_case column names. A row
that does not match the expected shape is a data error: validation fails
for the whole batch instead of silently dropping rows.

Exports:
    NormalizedOverlapResult: One validated overlap hit
    normalize_overlap_rows: Validate and convert a batch of rows
"""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from core.models.enums import OverlapSource
from util_logger import LoggerFactory, ComponentType, log_exceptions

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "OverlapResults")


class NormalizedOverlapResult(BaseModel):
    """Overlap hit; kawasan_id arrives as int or numeric string."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    kawasan_id: int
    nama_kawasan: str
    jenis_kawasan: str
    luas_overlap: float = Field(..., description="Overlap area in m²; NULL reads as 0")
    percentage_overlap: Optional[float] = Field(default=None, description="Share of the parcel, when computed")
    sumber: OverlapSource

    @field_validator("luas_overlap", mode="before")
    @classmethod
    def null_area_is_zero(cls, v: Any) -> Any:
        return 0.0 if v is None else v


_ROWS_ADAPTER = TypeAdapter(List[NormalizedOverlapResult])


@log_exceptions(logger=logger)
def normalize_overlap_rows(rows: Iterable[Any]) -> List[NormalizedOverlapResult]:
    """
    Validate raw overlap query rows.

    Args:
        rows: Mappings with kawasan_id, nama_kawasan, jenis_kawasan,
            luas_overlap, percentage_overlap (optional), sumber

    Returns:
        Validated results in row order

    Raises:
        pydantic.ValidationError: Any row with a missing or mistyped column
    """
    results = _ROWS_ADAPTER.validate_python(list(rows))
    logger.debug(f"Normalized {len(results)} overlap rows")
    return results

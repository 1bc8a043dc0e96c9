"""
Geographic Coordinate Model.

A land parcel is an ordered ring of at least three GeographicCoordinate
points. The ring is open in drafts (first point not repeated) and closed
when exported to GeoJSON.

Exports:
    GeographicCoordinate: One vertex of a parcel polygon
"""

from pydantic import BaseModel, ConfigDict, Field


class GeographicCoordinate(BaseModel):
    """One WGS84 vertex; `id` is a client-generated identifier."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

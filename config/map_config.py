"""
Static Map Image Configuration.

Provides configuration for:
    - Static map endpoint and API key
    - Image size, scale and map type
    - Polygon styling and path encoding
    - HTTP timeout for image downloads

Exports:
    MapConfig: Pydantic static map configuration model
"""

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field

from config.defaults import MapDefaults


# ============================================================================
# STATIC MAP CONFIGURATION
# ============================================================================

class MapConfig(BaseModel):
    """
    Static map image configuration.

    Controls the map attachment URL built for issued certificates.
    """

    api_key: Optional[str] = Field(
        default=None,
        description="Google Maps Static API key. No key means no map image URL.",
        repr=False
    )

    base_url: str = Field(
        default=MapDefaults.BASE_URL,
        description="Static map endpoint"
    )

    # Image settings
    width: int = Field(
        default=MapDefaults.WIDTH,
        ge=1,
        le=2048,
        description="Map width in pixels"
    )
    height: int = Field(
        default=MapDefaults.HEIGHT,
        ge=1,
        le=2048,
        description="Map height in pixels"
    )
    scale: Literal[1, 2] = Field(
        default=MapDefaults.SCALE,
        description="Image scale multiplier for better print quality"
    )
    map_type: Literal["roadmap", "satellite", "hybrid", "terrain"] = Field(
        default=MapDefaults.MAP_TYPE,
        description="Base map type"
    )

    # Polygon styling
    fill_color: str = Field(
        default=MapDefaults.FILL_COLOR,
        pattern=r"^[0-9a-fA-F]{6}$",
        description="Polygon fill color (hex without #)"
    )
    stroke_color: str = Field(
        default=MapDefaults.STROKE_COLOR,
        pattern=r"^[0-9a-fA-F]{6}$",
        description="Polygon stroke color (hex without #)"
    )
    stroke_weight: int = Field(
        default=MapDefaults.STROKE_WEIGHT,
        ge=1,
        le=20,
        description="Polygon stroke weight"
    )
    path_encoding: Literal["path", "polyline"] = Field(
        default=MapDefaults.PATH_ENCODING,
        description="'path' writes lat,lng pairs; 'polyline' uses the encoded polyline format"
    )

    timeout_seconds: int = Field(
        default=MapDefaults.TIMEOUT_SECONDS,
        ge=1,
        le=120,
        description="HTTP timeout for map image downloads"
    )

    def debug_dict(self) -> dict:
        """Configuration for debugging with the API key masked."""
        data = self.model_dump()
        data["api_key"] = "***MASKED***" if self.api_key else None
        return data

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        return cls(
            api_key=os.environ.get("GOOGLE_MAPS_API_KEY") or None,
            base_url=os.environ.get("STATIC_MAP_BASE_URL", MapDefaults.BASE_URL),
            width=int(os.environ.get("STATIC_MAP_WIDTH", str(MapDefaults.WIDTH))),
            height=int(os.environ.get("STATIC_MAP_HEIGHT", str(MapDefaults.HEIGHT))),
            scale=int(os.environ.get("STATIC_MAP_SCALE", str(MapDefaults.SCALE))),
            map_type=os.environ.get("STATIC_MAP_TYPE", MapDefaults.MAP_TYPE),
            path_encoding=os.environ.get("STATIC_MAP_PATH_ENCODING", MapDefaults.PATH_ENCODING).lower(),
            timeout_seconds=int(os.environ.get("STATIC_MAP_TIMEOUT_SECONDS", str(MapDefaults.TIMEOUT_SECONDS)))
        )

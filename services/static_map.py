# ============================================================================
# STATIC MAP CLIENT
# ============================================================================
# STATUS: Service - External map image integration
# PURPOSE: Build static map URLs for parcel polygons and download map images
# EXPORTS: StaticMapClient
# DEPENDENCIES: requests, config.map_config, core.logic.geometry
# ============================================================================
"""
Static Map Client.

Builds Google Maps Static API URLs showing the parcel polygon, for the map
attachment of the SPPTG certificate.

The client is an explicit, caller-owned handle: there is no module-level
instance. It holds the map configuration and, once an image is downloaded,
a requests.Session, released by close() or by leaving a with-block.

Map data is presentation-only: a missing API key, too few coordinates or a
failed download all yield None (logged) and the certificate is produced
without a map.

Exports:
    StaticMapClient: Map URL builder and image downloader
"""

import base64
from typing import Optional, Sequence
from urllib.parse import urlencode

import requests

from config.map_config import MapConfig
from core.logic.geometry import (
    calculate_centroid,
    calculate_zoom_level,
    encode_path,
    encode_polyline
)
from core.models.geo import GeographicCoordinate
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.ADAPTER, "StaticMapClient")

MIN_POLYGON_POINTS = 3
DEFAULT_IMAGE_MIME = "image/png"


class StaticMapClient:
    """
    Static map URL builder and image downloader.

    Example:
        with StaticMapClient.from_config() as client:
            url = client.generate_static_map_url(draft.coordinates_geografis)
    """

    def __init__(self, map_config: Optional[MapConfig] = None, session: Optional[requests.Session] = None):
        """
        Args:
            map_config: Map settings (default: MapConfig with defaults, no API key)
            session: HTTP session to use; left open by close() when supplied
        """
        self.config = map_config or MapConfig()
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_config(cls) -> 'StaticMapClient':
        """Client configured from the application configuration."""
        from config import get_config
        return cls(get_config().map)

    # ------------------------------------------------------------------
    # Resource handling
    # ------------------------------------------------------------------

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def __enter__(self) -> 'StaticMapClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # URL building
    # ------------------------------------------------------------------

    def _encoded_path(self, coords: Sequence[GeographicCoordinate]) -> str:
        if self.config.path_encoding == "polyline":
            return f"enc:{encode_polyline(coords)}"
        return encode_path(coords)

    def generate_static_map_url(self, coords: Sequence[GeographicCoordinate]) -> Optional[str]:
        """
        Static map URL centred on the parcel with the polygon drawn filled.

        Args:
            coords: Open parcel ring

        Returns:
            URL string, or None without an API key or with fewer than 3 points
        """
        if not self.config.api_key:
            logger.warning("Static map API key not configured; no map image URL")
            return None

        if len(coords) < MIN_POLYGON_POINTS:
            logger.warning(
                f"At least {MIN_POLYGON_POINTS} coordinates required for a map polygon, got {len(coords)}"
            )
            return None

        lat, lng = calculate_centroid(coords)
        cfg = self.config
        style = f"fillcolor:0x{cfg.fill_color}55|weight:{cfg.stroke_weight}|color:0x{cfg.stroke_color}FF"

        params = [
            ("key", cfg.api_key),
            ("center", f"{lat},{lng}"),
            ("zoom", str(calculate_zoom_level(coords))),
            ("size", f"{cfg.width}x{cfg.height}"),
            ("scale", str(cfg.scale)),
            ("maptype", cfg.map_type),
            ("path", f"{style}|{self._encoded_path(coords)}"),
        ]
        return f"{cfg.base_url}?{urlencode(params)}"

    # ------------------------------------------------------------------
    # Image download
    # ------------------------------------------------------------------

    def fetch_map_image_base64(self, coords: Sequence[GeographicCoordinate]) -> Optional[str]:
        """
        Download the map image as a data URL for embedding in a document.

        Returns:
            "data:<mime>;base64,..." or None when no URL can be built or the
            download fails
        """
        url = self.generate_static_map_url(coords)
        if not url:
            return None

        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            # The URL carries the API key; log the error type only
            logger.error(f"Failed to fetch static map image: {type(e).__name__}")
            return None

        mime = (response.headers.get("Content-Type") or DEFAULT_IMAGE_MIME).split(";")[0].strip()
        encoded = base64.b64encode(response.content).decode("ascii")
        logger.debug(f"Fetched static map image ({len(response.content)} bytes)")
        return f"data:{mime};base64,{encoded}"

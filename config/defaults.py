"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - AppDefaults: Environment, debug and logging
    - MapDefaults: Static map image service
    - CertificateDefaults: SPPTG certificate numbering

Usage:
    from config.defaults import MapDefaults

    # In Pydantic Field definitions:
    width: int = Field(default=MapDefaults.WIDTH, ...)
"""


# =============================================================================
# APPLICATION DEFAULTS
# =============================================================================

class AppDefaults:
    """Core application settings."""

    ENVIRONMENT = "dev"
    DEBUG_MODE = False
    LOG_LEVEL = "INFO"


# =============================================================================
# STATIC MAP DEFAULTS
# =============================================================================

class MapDefaults:
    """
    Static map image settings for the certificate map attachment.

    The API key has no default: without GOOGLE_MAPS_API_KEY no map URL
    is produced and the certificate is rendered without a map image.
    """

    BASE_URL = "https://maps.googleapis.com/maps/api/staticmap"
    WIDTH = 640
    HEIGHT = 420
    SCALE = 2
    MAP_TYPE = "roadmap"
    FILL_COLOR = "3b82f6"  # Blue
    STROKE_COLOR = "1d4ed8"  # Darker blue
    STROKE_WEIGHT = 3
    PATH_ENCODING = "path"
    TIMEOUT_SECONDS = 10


# =============================================================================
# CERTIFICATE DEFAULTS
# =============================================================================

class CertificateDefaults:
    """SPPTG certificate number settings."""

    PREFIX = "SPPTG"
    KODE_KABUPATEN = "00.00"
    SEQUENCE_WIDTH = 3

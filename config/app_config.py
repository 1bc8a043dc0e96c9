"""
Top-Level Application Settings.

AppConfig holds the process-wide settings and nests one model per
concern:
    - map: MapConfig (static map image for the certificate)
    - certificate: CertificateConfig (certificate numbering)

Exports:
    AppConfig: Settings root returned by config.get_config()
"""

import os

from pydantic import BaseModel, Field

from .map_config import MapConfig
from .certificate_config import CertificateConfig
from .defaults import AppDefaults


# ============================================================================
# APPLICATION SETTINGS
# ============================================================================

class AppConfig(BaseModel):
    """
    Settings root.

    Nested configs validate themselves; this class only adds the
    environment name, debug flag and log level.
    """

    debug_mode: bool = Field(
        default=AppDefaults.DEBUG_MODE,
        description="Verbose diagnostics (DEBUG_MODE=true)"
    )

    environment: str = Field(
        default=AppDefaults.ENVIRONMENT,
        description="Deployment name, e.g. dev, test, prod"
    )

    log_level: str = Field(
        default=AppDefaults.LOG_LEVEL,
        description="Level name for component loggers"
    )

    map: MapConfig = Field(
        default_factory=MapConfig,
        description="Static map image settings"
    )

    certificate: CertificateConfig = Field(
        default_factory=CertificateConfig,
        description="Certificate numbering settings"
    )

    @classmethod
    def from_environment(cls) -> 'AppConfig':
        """Read every setting from environment variables, defaults where unset."""
        debug_flag = os.environ.get("DEBUG_MODE", "")
        return cls(
            debug_mode=debug_flag.lower() == "true" if debug_flag else AppDefaults.DEBUG_MODE,
            environment=os.environ.get("ENVIRONMENT", AppDefaults.ENVIRONMENT),
            log_level=os.environ.get("LOG_LEVEL", AppDefaults.LOG_LEVEL).upper(),
            map=MapConfig.from_environment(),
            certificate=CertificateConfig.from_environment()
        )

"""
Configuration Package.

Settings are pydantic models loaded from environment variables, one module
per concern, with every default kept in config/defaults.py.

Layout:
    config/
    ├── __init__.py              # get_config() / reset_config() / debug_config()
    ├── app_config.py            # AppConfig: settings root
    ├── map_config.py            # MapConfig: static map image
    ├── certificate_config.py    # CertificateConfig: certificate numbering
    ├── defaults.py              # Default values
    └── env_validation.py        # Format check of the variables read here

Usage:
    from config import get_config
    kode = get_config().certificate.kode_kabupaten

    from config import debug_config
    info = debug_config()  # safe to log: API key masked
"""

from typing import Optional

from .map_config import MapConfig
from .certificate_config import CertificateConfig
from .app_config import AppConfig


# ============================================================================
# PROCESS-WIDE INSTANCE
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Settings loaded from the environment on first call, cached afterwards."""
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Current settings as a plain dict with secrets masked.

    Returns:
        {'environment', 'debug_mode', 'log_level', 'map', 'certificate'}
    """
    settings = get_config()
    return {
        'environment': settings.environment,
        'debug_mode': settings.debug_mode,
        'log_level': settings.log_level,
        'map': settings.map.debug_dict(),
        'certificate': settings.certificate.model_dump(),
    }


__all__ = [
    'AppConfig',
    'MapConfig',
    'CertificateConfig',
    'get_config',
    'reset_config',
    'debug_config',
]

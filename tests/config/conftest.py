"""
Config test fixtures: clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    env_vars_to_clear = [
        "ENVIRONMENT", "DEBUG_MODE", "LOG_LEVEL",
        "SPPTG_KODE_KABUPATEN",
        "GOOGLE_MAPS_API_KEY", "STATIC_MAP_BASE_URL",
        "STATIC_MAP_WIDTH", "STATIC_MAP_HEIGHT", "STATIC_MAP_SCALE",
        "STATIC_MAP_TYPE", "STATIC_MAP_PATH_ENCODING", "STATIC_MAP_TIMEOUT_SECONDS",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch

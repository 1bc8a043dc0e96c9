"""
AppConfig, MapConfig and CertificateConfig loading tests.
"""

import pytest
from pydantic import ValidationError

from config import (
    AppConfig,
    CertificateConfig,
    MapConfig,
    debug_config,
    get_config,
    reset_config,
)
from config.defaults import MapDefaults, CertificateDefaults


class TestDefaults:

    def test_app_defaults(self, clean_env):
        config = AppConfig.from_environment()
        assert config.environment == "dev"
        assert config.debug_mode is False
        assert config.log_level == "INFO"

    def test_map_defaults(self, clean_env):
        config = MapConfig.from_environment()
        assert config.api_key is None
        assert config.base_url == MapDefaults.BASE_URL
        assert (config.width, config.height, config.scale) == (640, 420, 2)
        assert config.path_encoding == "path"

    def test_certificate_default(self, clean_env):
        assert CertificateConfig.from_environment().kode_kabupaten == CertificateDefaults.KODE_KABUPATEN


class TestEnvironmentOverrides:

    def test_app_settings(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "prod")
        clean_env.setenv("DEBUG_MODE", "TRUE")
        clean_env.setenv("LOG_LEVEL", "debug")
        config = AppConfig.from_environment()
        assert config.environment == "prod"
        assert config.debug_mode is True
        assert config.log_level == "DEBUG"

    def test_map_settings(self, clean_env):
        clean_env.setenv("GOOGLE_MAPS_API_KEY", "AIzaSyA-example-key-000000")
        clean_env.setenv("STATIC_MAP_SCALE", "1")
        clean_env.setenv("STATIC_MAP_TYPE", "satellite")
        clean_env.setenv("STATIC_MAP_PATH_ENCODING", "POLYLINE")
        clean_env.setenv("STATIC_MAP_TIMEOUT_SECONDS", "30")
        config = MapConfig.from_environment()
        assert config.api_key == "AIzaSyA-example-key-000000"
        assert config.scale == 1
        assert config.map_type == "satellite"
        assert config.path_encoding == "polyline"
        assert config.timeout_seconds == 30

    def test_empty_api_key_is_none(self, clean_env):
        clean_env.setenv("GOOGLE_MAPS_API_KEY", "")
        assert MapConfig.from_environment().api_key is None

    def test_kode_kabupaten(self, clean_env):
        clean_env.setenv("SPPTG_KODE_KABUPATEN", "61.05")
        assert AppConfig.from_environment().certificate.kode_kabupaten == "61.05"

    def test_invalid_kode_kabupaten_rejected(self, clean_env):
        clean_env.setenv("SPPTG_KODE_KABUPATEN", "61-05")
        with pytest.raises(ValidationError):
            CertificateConfig.from_environment()


class TestMapConfigValidation:

    @pytest.mark.parametrize("overrides", [
        {"scale": 3},
        {"map_type": "street"},
        {"fill_color": "#3b82f6"},
        {"stroke_weight": 0},
        {"width": 4096},
        {"path_encoding": "wkt"},
    ], ids=["scale", "map-type", "hash-color", "weight", "width", "encoding"])
    def test_rejected(self, overrides):
        with pytest.raises(ValidationError):
            MapConfig(**overrides)

    def test_api_key_not_in_repr(self):
        assert "secret-key" not in repr(MapConfig(api_key="secret-key"))


class TestSingleton:

    def test_cached_until_reset(self, clean_env):
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first

    def test_reset_rereads_environment(self, clean_env):
        clean_env.setenv("SPPTG_KODE_KABUPATEN", "11.01")
        assert get_config().certificate.kode_kabupaten == "11.01"
        clean_env.setenv("SPPTG_KODE_KABUPATEN", "11.02")
        assert get_config().certificate.kode_kabupaten == "11.01"
        reset_config()
        assert get_config().certificate.kode_kabupaten == "11.02"

    def test_debug_config_masks_key(self, clean_env):
        clean_env.setenv("GOOGLE_MAPS_API_KEY", "AIzaSyA-example-key-000000")
        info = debug_config()
        assert info["map"]["api_key"] == "***MASKED***"
        assert "AIzaSyA" not in str(info)
        assert info["certificate"] == {"kode_kabupaten": "00.00"}

    def test_debug_config_without_key(self, clean_env):
        assert debug_config()["map"]["api_key"] is None

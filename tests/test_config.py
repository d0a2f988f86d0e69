"""Tests for configuration management."""

from datenorm.config import Settings


class TestConfiguration:
    """Test configuration loading and defaults."""

    def test_settings_loads(self):
        """Settings should load without errors."""
        settings = Settings()
        assert settings is not None

    def test_default_api_prefix(self):
        """Default API prefix should be set."""
        settings = Settings()
        assert settings.api_v1_prefix == "/api/v1"

    def test_default_time_zones(self):
        """Server and default client zones should default to UTC."""
        settings = Settings()
        assert settings.server_time_zone == "UTC"
        assert settings.default_time_zone == "UTC"

    def test_default_time_zone_header(self):
        """The client zone header should default to X-Timezone."""
        settings = Settings()
        assert settings.time_zone_header == "X-Timezone"

    def test_unknown_zones_tolerated_by_default(self):
        """Unknown client zones should not be rejected by default."""
        settings = Settings()
        assert settings.reject_unknown_time_zone is False

    def test_reads_environment(self, monkeypatch):
        """Settings should be overridable from the environment."""
        monkeypatch.setenv("SERVER_TIME_ZONE", "Africa/Johannesburg")
        monkeypatch.setenv("REJECT_UNKNOWN_TIME_ZONE", "true")

        settings = Settings()

        assert settings.server_time_zone == "Africa/Johannesburg"
        assert settings.reject_unknown_time_zone is True

    def test_cors_origins_is_list(self):
        """CORS origins should be a list."""
        settings = Settings()
        assert isinstance(settings.cors_origins, list)
        assert "http://localhost:3000" in settings.cors_origins

"""Unit tests for Settings configuration."""

import pytest

from hr_admin.core.config import Settings


@pytest.mark.unit
class TestSettings:
    def test_default_settings(self) -> None:
        """Check that default values are correct."""
        settings = Settings(
            _env_file=None,  # Prevent reading .env file during tests
        )
        assert settings.app_name == "HR Admin"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.port == 4000
        assert settings.host == "0.0.0.0"
        assert settings.max_upload_size_mb == 10
        assert settings.upload_dir == "./uploads"
        assert settings.jwt_algorithm == "HS256"
        assert settings.report_timezone == "UTC"
        assert settings.activity_feed_limit == 10

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Override env vars and verify settings pick them up."""
        monkeypatch.setenv("APP_NAME", "Test App")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("JWT_SECRET", "another-secret")
        monkeypatch.setenv("REPORT_TIMEZONE", "Asia/Colombo")
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", '["https://hr.example.com"]')

        settings = Settings(
            _env_file=None,  # Prevent reading .env file during tests
        )
        assert settings.app_name == "Test App"
        assert settings.debug is True
        assert settings.port == 9000
        assert settings.jwt_secret == "another-secret"
        assert settings.report_timezone == "Asia/Colombo"
        assert settings.cors_allowed_origins == ["https://hr.example.com"]

    def test_allowed_extensions_set(self) -> None:
        """The allowed_extensions default should cover CV document types."""
        settings = Settings(
            _env_file=None,  # Prevent reading .env file during tests
        )
        assert settings.allowed_extensions == {".pdf", ".doc", ".docx"}
        assert isinstance(settings.allowed_extensions, set)

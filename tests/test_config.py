"""
Tests for settings loading and the shared HTTP client.
"""

import pytest
from pydantic import ValidationError

from company_risk.config import Settings, build_http_client


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self, monkeypatch):
        for name in ("COMPANY_LIMIT", "LOG_LEVEL", "SAYARI_CLIENT_ID", "SAYARI_CLIENT_SECRET"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.company_limit == 5
        assert settings.log_level == "INFO"
        assert not settings.sayari_configured

    def test_log_level_is_uppercased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_only_settings_in_use_are_exposed(self):
        """Test that no logging option exists beyond the level the CLI applies."""
        logging_fields = {name for name in Settings.model_fields if name.startswith("log_")}
        assert logging_fields == {"log_level"}

    def test_negative_company_limit_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, company_limit=-1)

    def test_sayari_configured_needs_both_credentials(self):
        assert not Settings(_env_file=None, sayari_client_id="id").sayari_configured
        assert Settings(
            _env_file=None, sayari_client_id="id", sayari_client_secret="secret"
        ).sayari_configured


class TestBuildHttpClient:
    def test_timeout_applied(self):
        settings = Settings(_env_file=None, http_timeout=7.5)

        with build_http_client(settings) as client:
            assert client.timeout.read == 7.5
            assert client.follow_redirects

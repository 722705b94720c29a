"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from vetstudy.config import Settings
from vetstudy.core.constants import DEFAULT_INSECURE_SECRET


pytestmark = pytest.mark.unit


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.app_name == "MyVetStudy"
        assert settings.jwt_algorithm == "HS256"
        assert settings.is_development is True

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            Settings(_env_file=None, secret_key="too-short")

    def test_long_secret_accepted(self):
        settings = Settings(_env_file=None, secret_key="x" * 40)

        assert settings.secret_key == "x" * 40

    def test_default_secret_refused_in_production(self):
        settings = Settings(
            _env_file=None,
            environment="production",
            secret_key=DEFAULT_INSECURE_SECRET,
        )

        with pytest.raises(ValueError, match="production"):
            _ = settings.is_production

    def test_production_with_real_secret(self):
        settings = Settings(
            _env_file=None, environment="production", secret_key="s" * 48
        )

        assert settings.is_production is True
        assert settings.is_development is False

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("APP_NAME", "Clinic Access")
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")

        settings = Settings(_env_file=None)

        assert settings.app_name == "Clinic Access"
        assert settings.access_token_expire_minutes == 5

# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "JWT_ALGORITHM", "JWT_EXPIRE_HOURS", "DB_CONNECT_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.PORT == 5001
        assert settings.JWT_ALGORITHM == "HS256"
        assert settings.jwt_expire_seconds == 24 * 3600
        assert settings.DB_CONNECT_TIMEOUT_SECONDS == 5.0

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")

        assert Settings(_env_file=None).PORT == 8080

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError):
            Settings(JWT_SECRET="short")

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            Settings(STORE_BACKEND="mongodb")

    def test_fractional_expiry(self):
        assert Settings(JWT_EXPIRE_HOURS=0.5).jwt_expire_seconds == 1800

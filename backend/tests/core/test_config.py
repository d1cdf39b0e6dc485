"""Tests for application configuration."""
import pytest
from pydantic import ValidationError

from core.config import Settings

SECRET = "config-test-secret-0123456789abcdef"


def make(**values: object) -> Settings:
    return Settings(_env_file=None, database_url="postgresql+asyncpg://db/test", **values)


class TestJwtSecret:
    """JWT_SECRET is mandatory."""

    def test__settings__requires_jwt_secret(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError, match="JWT_SECRET is required"):
            make()

    def test__settings__rejects_blank_jwt_secret(self) -> None:
        with pytest.raises(ValidationError, match="JWT_SECRET is required"):
            make(JWT_SECRET="   ")

    def test__settings__reads_jwt_secret_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JWT_SECRET", SECRET)
        assert make().jwt_secret == SECRET


class TestDefaults:
    """Defaults for optional settings."""

    def test__settings__defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("BCRYPT_ROUNDS", "COOKIE_SECURE", "COOKIE_SAMESITE", "COOKIE_DOMAIN"):
            monkeypatch.delenv(name, raising=False)
        settings = make(JWT_SECRET=SECRET)
        assert settings.bcrypt_rounds == 12
        assert settings.cookie_secure is None
        assert settings.cookie_samesite is None
        assert settings.cookie_domain is None
        assert settings.is_sqlite is False

    def test__settings__bcrypt_rounds_bounds(self) -> None:
        with pytest.raises(ValidationError):
            make(JWT_SECRET=SECRET, BCRYPT_ROUNDS=3)

    def test__settings__is_sqlite(self) -> None:
        settings = Settings(_env_file=None, database_url="sqlite+aiosqlite://", JWT_SECRET=SECRET)
        assert settings.is_sqlite is True


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_parse_multiple_origins_comma_separated(self) -> None:
        """Multiple comma-separated origins are parsed correctly."""
        settings = make(
            JWT_SECRET=SECRET,
            CORS_ORIGINS="http://localhost:8081, https://app.example.com ,",
        )
        assert settings.cors_origins == ["http://localhost:8081", "https://app.example.com"]

    def test_parse_empty_string(self) -> None:
        """Empty string results in empty list."""
        assert make(JWT_SECRET=SECRET, CORS_ORIGINS="").cors_origins == []

"""Settings tests."""

from devevent.config import Settings, get_settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://localhost/devevent")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example,")

    settings = Settings()

    assert settings.database_url == "postgresql+asyncpg://localhost/devevent"
    assert settings.is_development is False
    assert settings.cors_allowed_origins == ["https://a.example", "https://b.example"]


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = Settings()

    assert settings.database_url == ""
    assert settings.is_development is True
    assert settings.upload_backend == "local"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

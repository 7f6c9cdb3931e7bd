import pytest

from backend.app.core.settings import Settings, get_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "Bookkeeping API"
    assert isinstance(settings.secret_key, str) and settings.secret_key
    assert isinstance(settings.database_url, str) and settings.database_url
    assert get_settings() is settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")
    monkeypatch.setenv("COMPANY_NAME", "Acme Interiors")
    settings = Settings()
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.access_token_expire_minutes == 15
    assert settings.company_name == "Acme Interiors"


def test_postgres_scheme_is_normalized():
    settings = Settings(database_url="postgres://user:pw@db/books")
    assert settings.database_url == "postgresql://user:pw@db/books"


def test_unknown_override_rejected():
    with pytest.raises(AttributeError):
        Settings(not_a_setting=True)

"""Tests for application settings."""

from grocerylist.config import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    """Test default settings values."""
    for name in ("ENVIRONMENT", "LOG_LEVEL", "ALLOWED_ORIGINS", "CUSTOM_ITEM_AMOUNT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.custom_item_amount == "1 piece"
    assert settings.export_bullet == "•"
    assert settings.is_development
    assert settings.origins == ["http://localhost:3000", "http://localhost:8000"]


def test_environment_overrides(monkeypatch) -> None:
    """Test that environment variables override defaults."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("CUSTOM_ITEM_AMOUNT", "1 each")

    settings = Settings(_env_file=None)
    assert not settings.is_development
    assert settings.origins == ["https://a.example", "https://b.example"]
    assert settings.custom_item_amount == "1 each"


def test_get_settings_is_cached() -> None:
    """Test that settings are built once and shared."""
    assert get_settings() is get_settings()

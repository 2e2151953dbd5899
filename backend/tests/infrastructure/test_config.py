"""Settings — environment overrides and URL normalization."""

from showcase.config import Settings


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_stream_interval_from_environment(monkeypatch):
    monkeypatch.setenv("STREAM_INTERVAL_MS", "250")
    assert Settings().stream_interval_ms == 250


def test_page_size_defaults():
    settings = Settings()
    assert settings.default_page_size == 100
    assert settings.max_page_size == 500

"""Unit tests for application settings."""

from judgehub_config import Settings, get_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("PASSWORD_RESET_TOKEN_EXPIRE_SECONDS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./data/judgehub.db"
        assert settings.password_reset_token_expire_seconds == 3600
        assert settings.password_hash_rounds == 12

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PASSWORD_RESET_TOKEN_EXPIRE_SECONDS", "60")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.password_reset_token_expire_seconds == 60
        assert settings.log_level == "DEBUG"

    def test_plain_postgres_url_uses_asyncpg(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/judge")

        assert get_settings().database_url == "postgresql+asyncpg://u:p@db/judge"

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

# -*- coding: utf-8 -*-
"""
Unit тесты для настроек приложения
"""

from quizonline.config.settings import Settings
from quizonline.config.uvicorn_config import get_uvicorn_config
from quizonline.utils.startup_banner import get_database_label


class TestSettings:
    """Тесты Settings"""

    def test_database_url_built_from_components(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = Settings(
            postgres_user="quiz",
            postgres_password="secret",
            postgres_host="db",
            postgres_port=5433,
            postgres_db="quizzes",
        )

        assert settings.database_url == "postgresql+asyncpg://quiz:secret@db:5433/quizzes"

    def test_explicit_database_url_wins(self):
        settings = Settings(database_url="sqlite+aiosqlite:///./local.db")

        assert settings.database_url == "sqlite+aiosqlite:///./local.db"

    def test_cors_lists(self):
        settings = Settings(
            cors_allow_origins="http://a.example, http://b.example,",
            cors_allow_methods="*",
            cors_allow_headers="Content-Type,Authorization",
        )

        assert settings.get_allowed_origins() == ["http://a.example", "http://b.example"]
        assert settings.get_cors_methods() == ["*"]
        assert settings.get_cors_headers() == ["Content-Type", "Authorization"]

    def test_default_origins_from_frontend_port(self):
        settings = Settings(cors_allow_origins="", frontend_port=3000)

        assert "http://localhost:3000" in settings.get_allowed_origins()

    def test_uvicorn_config_points_to_app(self):
        config = get_uvicorn_config()

        assert config["app"] == "quizonline.main:app"
        assert config["log_config"] is None

    def test_database_label_hides_credentials(self, monkeypatch):
        from quizonline.utils import startup_banner

        monkeypatch.setattr(
            startup_banner.settings,
            "database_url",
            "postgresql+asyncpg://quiz:secret@db:5432/quizzes",
        )

        label = get_database_label()

        assert "secret" not in label
        assert label == "quizzes@db:5432"

    def test_startup_banner_omits_password(self, monkeypatch, capsys):
        from quizonline.utils import startup_banner

        monkeypatch.setattr(
            startup_banner.settings,
            "database_url",
            "postgresql+asyncpg://quiz:secret@db:5432/quizzes",
        )

        startup_banner.print_startup_banner()

        output = capsys.readouterr().out
        assert "Quiz Online API" in output
        assert "quizzes@db:5432" in output
        assert "secret" not in output

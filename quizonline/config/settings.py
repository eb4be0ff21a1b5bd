# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Этот модуль загружает конфигурацию из переменных окружения и .env файла,
предоставляя централизованную систему управления настройками для всех окружений.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Корень проекта (QuizOnline/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ROOT_ENV_PATH = (BASE_DIR / ".env").resolve()

# Приоритет: 1) переменные окружения, 2) корневой .env файл (если существует)
ENV_FILE = ROOT_ENV_PATH if ROOT_ENV_PATH.exists() else None


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из окружения и .env файла."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str | None = None
    postgres_db: str = "quizonline"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    # Создавать таблицы при старте (миграции не используются)
    create_tables_on_startup: bool = True

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    # Домен приложения (для prod)
    app_domain: str | None = None
    # Внешний порт фронтенда
    frontend_port: int | None = None
    debug: bool = False

    # Конфигурация логирования
    log_level: str = "INFO"

    # Конфигурация CORS
    cors_allow_origins: str = ""
    cors_allow_credentials: bool = True
    cors_allow_methods: str = "GET,POST,PUT,DELETE,OPTIONS"
    cors_allow_headers: str = "Content-Type"

    def get_allowed_origins(self) -> list[str]:
        """Формирует список разрешённых origins для CORS.
        Приоритет: явные cors_allow_origins -> из домена/порта фронтенда.
        """
        if self.cors_allow_origins:
            return [
                origin.strip()
                for origin in self.cors_allow_origins.split(",")
                if origin.strip()
            ]

        allowed: list[str] = []

        if self.app_domain:
            allowed.append(f"http://{self.app_domain}")
            allowed.append(f"https://{self.app_domain}")

        # Dev localhost (фронтенд на Vite по умолчанию)
        port = self.frontend_port or 5173
        allowed.extend(
            [
                f"http://localhost:{port}",
                f"http://127.0.0.1:{port}",
            ]
        )
        return allowed

    def get_cors_methods(self) -> list[str]:
        """Возвращает список разрешённых HTTP методов для CORS."""
        if self.cors_allow_methods == "*":
            return ["*"]
        return [
            method.strip()
            for method in self.cors_allow_methods.split(",")
            if method.strip()
        ]

    def get_cors_headers(self) -> list[str]:
        """Возвращает список разрешённых заголовков для CORS."""
        if self.cors_allow_headers == "*":
            return ["*"]
        return [
            header.strip()
            for header in self.cors_allow_headers.split(",")
            if header.strip()
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Build database URL from components if not provided directly
        if not self.database_url:
            self.database_url = self._build_database_url()

    def _build_database_url(self) -> str:
        """Build database URL from individual components."""
        # Используем asyncpg для асинхронного подключения в FastAPI
        driver = "postgresql+asyncpg"
        return f"{driver}://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ROOT_ENV_PATH.exists():
            return f"root: {ROOT_ENV_PATH}"
        return "environment variables only"


settings = Settings()

# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn с логами через loguru.
"""

import logging

from quizonline.config.logger import InterceptHandler
from quizonline.config.settings import settings

INTERCEPTED_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "fastapi",
    "sqlalchemy.engine",
    "sqlalchemy.pool",
)


def setup_uvicorn_logging():
    """Настраивает перехват логов uvicorn и SQLAlchemy."""

    # Очищаем существующие обработчики
    for logger_name in INTERCEPTED_LOGGERS:
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers.clear()
        logger_obj.propagate = False

    logging.getLogger("uvicorn").handlers = [InterceptHandler()]
    logging.getLogger("uvicorn.error").handlers = [InterceptHandler()]
    logging.getLogger("fastapi").handlers = [InterceptHandler()]

    # SQLAlchemy: только предупреждения и ошибки
    logging.getLogger("sqlalchemy.engine").handlers = [InterceptHandler()]
    logging.getLogger("sqlalchemy.pool").handlers = [InterceptHandler()]

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(
        logging.WARNING
    )  # Скрываем access логи, запросы логирует middleware
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)


def get_uvicorn_config():
    """Возвращает конфигурацию для uvicorn."""
    return {
        "app": "quizonline.main:app",
        "host": settings.app_host,
        "port": settings.app_port,
        "reload": settings.debug,
        "log_config": None,  # Отключаем стандартную конфигурацию логов
        "access_log": True,
        "use_colors": True,
    }

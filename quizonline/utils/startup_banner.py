# -*- coding: utf-8 -*-
"""
Модуль для отображения баннера при запуске приложения.
"""

import platform
from datetime import datetime

from sqlalchemy.engine import make_url

from quizonline.config.settings import settings

APP_BANNER = """
                               ❓ Quiz Online API 🚀
"""


def get_database_label() -> str:
    """Адрес базы данных без учетных данных."""
    url = make_url(settings.database_url)
    if url.host:
        return f"{url.database}@{url.host}:{url.port or ''}"
    return f"{url.drivername}:{url.database or 'memory'}"


def get_startup_info() -> str:
    """Возвращает информацию о запуске приложения."""
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return (
        f"\n"
        f"      📅 Запуск: {now}\n"
        f"      🐍 Python: {platform.python_version()}\n"
        f"      🌐 API: http://{settings.app_host}:{settings.app_port}/api/quizzes\n"
        f"      📊 База данных: {get_database_label()}\n"
        f"      ⚙️  Конфиг: {settings.get_config_source()}\n"
    )


def print_startup_banner():
    """Выводит баннер при запуске."""
    try:
        print(APP_BANNER)
        print(get_startup_info())
        print("    " + "=" * 80)
    except UnicodeEncodeError:
        # Fallback для Windows консоли с проблемами кодировки
        print("=" * 80)
        print("Quiz Online API")
        print("=" * 80)

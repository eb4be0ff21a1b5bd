# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных.
"""
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

from quizonline.config.settings import settings
from quizonline.domain.models import Base

# Создаем асинхронный движок для подключения к базе данных
async_engine = create_async_engine(
    settings.database_url,
    echo=False,  # SQL запросы не логируем
    pool_pre_ping=True,  # Проверяем соединение перед использованием
    pool_recycle=3600,  # Переподключаемся каждый час
)

# Создаем фабрику асинхронных сессий
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Предоставляет асинхронную сессию базы данных для внедрения зависимостей в FastAPI.

    Yields:
        AsyncSession: Активная сессия базы данных

    Raises:
        SQLAlchemyError: Ошибки подключения к базе данных
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def check_connection() -> None:
    """
    Проверяет доступность базы данных запросом ``SELECT 1``.

    Raises:
        OperationalError: База данных недоступна
    """
    async with async_engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_db() -> None:
    """
    Инициализирует базу данных, создавая все определенные таблицы.

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
    """
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Закрывает пул соединений."""
    await async_engine.dispose()

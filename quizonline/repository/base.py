# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for generic CRUD functionality.

This module provides reusable asynchronous CRUD helpers using SQLAlchemy 2.0
async ORM, with logging. It is stateless: every helper receives the session
it works with.
"""

from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizonline.config.logger import configure_logger
from quizonline.domain.models import Base

T = TypeVar("T", bound=Base)

logger = configure_logger()

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


async def find_item(session: AsyncSession, model: Type[T], item_id: Any) -> Optional[T]:
    """Retrieve a single item by ID, ``None`` if it does not exist."""
    stmt = select(model).where(getattr(model, "id") == item_id)
    result = await session.execute(stmt)
    return result.scalars().first()


async def save_item(session: AsyncSession, instance: T) -> T:
    """Insert a new item or flush changes of an existing one."""
    session.add(instance)
    try:
        await session.commit()
    except Exception:
        logger.exception(f"Ошибка сохранения {type(instance).__name__}")
        await session.rollback()
        raise
    await session.refresh(instance)
    return instance


async def create_item(session: AsyncSession, model: Type[T], **kwargs: Any) -> T:
    """Create a new item in the database."""
    return await save_item(session, model(**kwargs))


async def delete_item(session: AsyncSession, instance: Base) -> None:
    """Delete an item from the database."""
    await session.delete(instance)
    try:
        await session.commit()
    except Exception:
        logger.exception(f"Ошибка удаления {type(instance).__name__}")
        await session.rollback()
        raise


async def list_items(
    session: AsyncSession,
    model: Type[T],
    skip: int = 0,
    limit: int = 100,
    order_by: Any = None,
    **filters,
) -> List[T]:
    """Retrieve a list of items filtered by the given criteria."""
    stmt = select(model).filter_by(**filters)

    if order_by is not None:
        stmt = stmt.order_by(order_by)

    # Применяем пагинацию (limit=0 - без ограничения)
    if skip > 0:
        stmt = stmt.offset(skip)
    if limit > 0:
        stmt = stmt.limit(limit)

    result = await session.execute(stmt)
    items = result.scalars().all()
    logger.debug(f"Retrieved {len(items)} {model.__name__} items")
    return list(items)

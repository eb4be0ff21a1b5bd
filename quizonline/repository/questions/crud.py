# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/repository/questions/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для работы с вопросами.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizonline.config.logger import configure_logger
from quizonline.domain.models import Question
from quizonline.repository.base import (delete_item, find_item, list_items,
                                        save_item)

logger = configure_logger()


class QuestionRepository:
    """Хранилище вопросов поверх асинхронной сессии SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, question: Question) -> Question:
        """Сохранить вопрос (вставка или перезапись по ID)."""
        if question.id is None:
            logger.debug(f"Создание нового вопроса по предмету '{question.subject}'")
        else:
            logger.debug(f"Перезапись вопроса {question.id}")
        return await save_item(self.session, question)

    async def find_all(self) -> List[Question]:
        """Получить все вопросы."""
        logger.debug("Получение списка всех вопросов")
        return await list_items(self.session, Question, limit=0, order_by=Question.id)

    async def find_by_id(self, question_id: int) -> Optional[Question]:
        """Получить вопрос по ID."""
        logger.debug(f"Получение вопроса с ID: {question_id}")
        return await find_item(self.session, Question, question_id)

    async def delete_by_id(self, question_id: int) -> None:
        """Удалить вопрос вместе с вариантами и правильными ответами."""
        question = await find_item(self.session, Question, question_id)
        if question is None:
            logger.debug(f"Вопрос {question_id} не найден, удалять нечего")
            return
        await delete_item(self.session, question)
        logger.debug(f"Вопрос {question_id} удален")

    async def find_distinct_subjects(self) -> List[str]:
        """Получить список уникальных предметов."""
        logger.debug("Получение списка предметов")
        stmt = select(Question.subject).distinct()
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_subject(self, subject: str, limit: int) -> List[Question]:
        """
        Получить первую страницу вопросов по предмету.

        Raises:
            ValueError: Размер страницы меньше единицы
        """
        if limit < 1:
            raise ValueError(f"Размер страницы должен быть не меньше 1, получено {limit}")
        logger.debug(f"Получение вопросов по предмету '{subject}': limit={limit}")
        return await list_items(
            self.session,
            Question,
            skip=0,
            limit=limit,
            order_by=Question.id,
            subject=subject,
        )

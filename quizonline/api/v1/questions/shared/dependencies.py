# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/shared/dependencies.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сборка хранилища и сервиса вопросов для обработчиков запросов.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quizonline.clients.database_client import get_db
from quizonline.repository.questions import QuestionRepository, QuestionStore
from quizonline.service.questions import (QuestionService,
                                         QuestionServiceProtocol)


def get_question_store(session: AsyncSession = Depends(get_db)) -> QuestionStore:
    """Хранилище вопросов, привязанное к сессии запроса."""
    return QuestionRepository(session)


def get_question_service(
    store: QuestionStore = Depends(get_question_store),
) -> QuestionServiceProtocol:
    """Сервис вопросов поверх хранилища запроса."""
    return QuestionService(store)

# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/crud/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции создания для работы с вопросами.
"""

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from quizonline.config.logger import configure_logger
from quizonline.domain.models import Question
from quizonline.service.questions import QuestionServiceProtocol

from ..shared import (QuestionCreateSchema, QuestionReadSchema,
                      get_question_service, validate_question_payload)

logger = configure_logger()

router = APIRouter(tags=["❓ Вопросы - ➕ Создание"])


@router.post(
    "/create-new-question",
    response_model=QuestionReadSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_question_endpoint(
    question_data: QuestionCreateSchema,
    service: QuestionServiceProtocol = Depends(get_question_service),
):
    """
    Создать новый вопрос.

    - **text**: текст вопроса
    - **subject**: предмет
    - **questionType**: тип вопроса
    - **choices**: варианты ответов
    - **correctAnswers**: правильные ответы
    """
    validate_question_payload(question_data)

    try:
        question = Question(
            question=question_data.question,
            subject=question_data.subject,
            question_type=question_data.question_type,
            choices=question_data.choices,
            correct_answers=question_data.correct_answers,
        )
        return await service.create_question(question)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Ошибка создания вопроса: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Ошибка создания вопроса: {str(e)}",
        )

# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/crud/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции обновления для работы с вопросами.
"""

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from quizonline.config.logger import configure_logger
from quizonline.service.questions import QuestionServiceProtocol

from ..shared import (QuestionReadSchema, QuestionUpdateSchema,
                      get_question_service, validate_question_payload)

logger = configure_logger()

router = APIRouter(tags=["❓ Вопросы - ✏️ Обновление"])


@router.put("/question/{question_id}/update", response_model=QuestionReadSchema)
async def update_question_endpoint(
    question_id: int,
    question_data: QuestionUpdateSchema,
    service: QuestionServiceProtocol = Depends(get_question_service),
):
    """
    Обновить вопрос.

    - **question_id**: ID вопроса для обновления
    - **text**: новый текст вопроса (опционально)
    - **choices**: новые варианты ответов (опционально)
    - **correctAnswers**: новые правильные ответы (опционально)

    Предмет и тип вопроса при обновлении не меняются.
    """
    validate_question_payload(question_data, partial=True)

    try:
        return await service.update_question(
            question_id=question_id,
            question=question_data.question,
            choices=question_data.choices,
            correct_answers=question_data.correct_answers,
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Ошибка обновления вопроса {question_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Ошибка обновления вопроса: {str(e)}",
        )

# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/crud/delete.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции удаления для работы с вопросами.
"""

from fastapi import APIRouter, Depends, Response
from starlette import status

from quizonline.service.questions import QuestionServiceProtocol

from ..shared import get_question_service

router = APIRouter(tags=["❓ Вопросы - 🗑️ Удаление"])


@router.delete(
    "/question/{question_id}/delete",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_question_endpoint(
    question_id: int,
    service: QuestionServiceProtocol = Depends(get_question_service),
):
    """
    Удалить вопрос. Повторное удаление не является ошибкой.

    - **question_id**: ID вопроса
    """
    await service.delete_question(question_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/crud/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции чтения для работы с вопросами.
"""

from typing import List

from fastapi import APIRouter, Depends

from quizonline.service.questions import QuestionServiceProtocol
from quizonline.utils.exceptions import NotFoundError

from ..shared import QuestionReadSchema, get_question_service

router = APIRouter(tags=["❓ Вопросы - 📖 Чтение"])


@router.get("/all-questions", response_model=List[QuestionReadSchema])
async def list_all_questions_endpoint(
    service: QuestionServiceProtocol = Depends(get_question_service),
):
    """Получить список всех вопросов."""
    return await service.get_all_questions()


@router.get("/question/{question_id}", response_model=QuestionReadSchema)
async def get_question_endpoint(
    question_id: int,
    service: QuestionServiceProtocol = Depends(get_question_service),
):
    """
    Получить вопрос по ID.

    - **question_id**: ID вопроса
    """
    question = await service.get_question_by_id(question_id)
    if question is None:
        raise NotFoundError(resource_type="Question", resource_id=question_id)
    return question


@router.get("/subjects", response_model=List[str])
async def list_subjects_endpoint(
    service: QuestionServiceProtocol = Depends(get_question_service),
):
    """Получить список уникальных предметов."""
    return await service.get_all_subjects()

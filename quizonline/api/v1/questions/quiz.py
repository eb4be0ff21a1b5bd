# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/quiz.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Подбор случайных вопросов для прохождения викторины.
"""

import random
from typing import List

from fastapi import APIRouter, Depends, Query

from quizonline.config.logger import configure_logger
from quizonline.service.questions import QuestionServiceProtocol

from .shared import QuestionReadSchema, get_question_service

logger = configure_logger()

router = APIRouter(prefix="/quiz", tags=["🧪 Викторина"])


@router.get("/fetch-question-for-user", response_model=List[QuestionReadSchema])
async def fetch_questions_for_user_endpoint(
    num_of_questions: int = Query(
        ..., alias="numOfQuestions", ge=1, description="Количество вопросов"
    ),
    subject: str = Query(..., description="Предмет"),
    service: QuestionServiceProtocol = Depends(get_question_service),
):
    """
    Получить случайный набор вопросов по предмету.

    - **numOfQuestions**: сколько вопросов вернуть (не больше)
    - **subject**: предмет
    """
    questions = list(await service.get_questions_for_user(num_of_questions, subject))
    random.shuffle(questions)

    available_questions = min(len(questions), num_of_questions)
    logger.debug(
        f"Выдано {available_questions} вопросов по предмету '{subject}' (запрошено {num_of_questions})"
    )
    return questions[:available_questions]

# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования вопросов
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from quizonline.domain.models import Question
from quizonline.repository.base import create_item


async def create_test_question(
    session: AsyncSession,
    text: str = "Сколько будет 2 + 2?",
    subject: str = "Math",
    question_type: str = "MCQ",
    choices: Optional[List[str]] = None,
    correct_answers: Optional[List[str]] = None,
) -> Question:
    """Создать тестовый вопрос"""
    return await create_item(
        session,
        Question,
        question=text,
        subject=subject,
        question_type=question_type,
        choices=choices if choices is not None else ["3", "4"],
        correct_answers=correct_answers if correct_answers is not None else ["4"],
    )


async def create_test_questions(
    session: AsyncSession, subject: str = "Math", count: int = 3
) -> List[Question]:
    """Создать несколько тестовых вопросов по одному предмету"""
    questions = []
    for i in range(count):
        question = await create_test_question(
            session,
            text=f"{subject} question {i + 1}",
            subject=subject,
            choices=[f"A{i}", f"B{i}", f"C{i}"],
            correct_answers=[f"B{i}"],
        )
        questions.append(question)
    return questions


def question_payload(**overrides) -> dict:
    """Тело запроса на создание вопроса"""
    payload = {
        "text": "Сколько будет 2 + 2?",
        "subject": "Math",
        "questionType": "MCQ",
        "choices": ["3", "4"],
        "correctAnswers": ["4"],
    }
    payload.update(overrides)
    return payload

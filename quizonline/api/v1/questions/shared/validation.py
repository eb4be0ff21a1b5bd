# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/shared/validation.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Проверка входных данных вопроса до создания доменной записи.
"""

from typing import Any, Iterable, List, Tuple

from pydantic import BaseModel

from quizonline.utils.exceptions import ValidationError

# (атрибут схемы, имя поля на проводе)
CREATE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("question", "text"),
    ("subject", "subject"),
    ("question_type", "questionType"),
    ("choices", "choices"),
    ("correct_answers", "correctAnswers"),
)

UPDATE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("question", "text"),
    ("choices", "choices"),
    ("correct_answers", "correctAnswers"),
)


def is_blank(value: Any) -> bool:
    """Пустая строка, строка из пробелов, пустой список или список с такими строками."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    items = list(value)
    return not items or any(is_blank(item) for item in items)


def find_invalid_fields(
    payload: BaseModel, fields: Iterable[Tuple[str, str]], partial: bool = False
) -> List[str]:
    """
    Возвращает имена полей (как на проводе), не прошедших проверку.

    При ``partial=True`` незаданные (None) поля пропускаются.
    """
    invalid = []
    for attr, wire_name in fields:
        value = getattr(payload, attr)
        if value is None and partial:
            continue
        if is_blank(value):
            invalid.append(wire_name)
    return invalid


def validate_question_payload(payload: BaseModel, partial: bool = False) -> None:
    """
    Проверяет, что обязательные поля вопроса не пустые.

    Args:
        payload: Схема создания или обновления вопроса
        partial: Проверка частичного обновления (только текст, варианты и ответы)

    Raises:
        ValidationError: Список полей, не прошедших проверку
    """
    fields = UPDATE_FIELDS if partial else CREATE_FIELDS
    invalid = find_invalid_fields(payload, fields, partial=partial)
    if invalid:
        raise ValidationError(
            detail=f"Поля не должны быть пустыми: {', '.join(invalid)}",
            fields=invalid,
        )

# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic схемы для работы с вопросами.

На проводе используются camelCase имена (``questionType``, ``correctAnswers``),
текст вопроса передается в поле ``text`` (на входе также принимается ``question``).
"""

from typing import List, Optional

from pydantic import (AliasChoices, AliasGenerator, BaseModel, ConfigDict,
                      Field, field_validator)
from pydantic.alias_generators import to_camel

TEXT_ALIASES = AliasChoices("text", "question")


class QuestionCreateSchema(BaseModel):
    """Схема для создания вопроса."""

    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "text": "Сколько будет 2 + 2?",
                "subject": "Math",
                "questionType": "single",
                "choices": ["3", "4", "5"],
                "correctAnswers": ["4"],
            }
        },
    )

    question: str = Field(validation_alias=TEXT_ALIASES)
    subject: str
    question_type: str
    choices: List[str]
    correct_answers: List[str]


class QuestionUpdateSchema(BaseModel):
    """
    Схема для обновления вопроса.

    Поля subject и questionType допускаются в теле запроса, но не применяются.
    """

    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "text": "Сколько будет 3 + 3?",
                "choices": ["5", "6"],
                "correctAnswers": ["6"],
            }
        },
    )

    question: Optional[str] = Field(default=None, validation_alias=TEXT_ALIASES)
    subject: Optional[str] = None
    question_type: Optional[str] = None
    choices: Optional[List[str]] = None
    correct_answers: Optional[List[str]] = None


class QuestionReadSchema(BaseModel):
    """Схема для чтения информации о вопросе."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: int
    question: str = Field(serialization_alias="text")
    subject: str
    question_type: str
    choices: List[str]
    correct_answers: List[str]

    @field_validator("choices", "correct_answers", mode="before")
    @classmethod
    def _as_list(cls, value):
        # ORM отдает прокси-коллекцию, а не list
        if value is None or isinstance(value, list):
            return value
        return list(value)

# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты для работы с вопросами.
"""

from .dependencies import get_question_service, get_question_store
from .schemas import (QuestionCreateSchema, QuestionReadSchema,
                      QuestionUpdateSchema)
from .validation import validate_question_payload

__all__ = [
    "QuestionCreateSchema",
    "QuestionUpdateSchema",
    "QuestionReadSchema",
    "get_question_service",
    "get_question_store",
    "validate_question_payload",
]

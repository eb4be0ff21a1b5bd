# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/repository/questions/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Репозиторий для работы с вопросами.
"""

from .crud import QuestionRepository
from .store import QuestionStore

__all__ = [
    "QuestionRepository",
    "QuestionStore",
]

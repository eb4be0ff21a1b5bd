# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/repository/questions/store.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Интерфейс хранилища вопросов.
"""

from typing import List, Optional, Protocol

from quizonline.domain.models import Question


class QuestionStore(Protocol):
    """Операции хранилища, на которые опирается сервис вопросов."""

    async def save(self, question: Question) -> Question:
        """Вставить новый вопрос (с присвоением id) или перезаписать существующий."""
        ...

    async def find_all(self) -> List[Question]:
        """Все вопросы."""
        ...

    async def find_by_id(self, question_id: int) -> Optional[Question]:
        """Вопрос по ID или ``None``, если его нет."""
        ...

    async def delete_by_id(self, question_id: int) -> None:
        """Удалить вопрос, если он существует."""
        ...

    async def find_distinct_subjects(self) -> List[str]:
        """Каждый предмет ровно один раз."""
        ...

    async def find_by_subject(self, subject: str, limit: int) -> List[Question]:
        """Первая страница размером ``limit`` из вопросов по предмету."""
        ...

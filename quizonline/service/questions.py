# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/service/questions.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисный слой для работы с вопросами.
"""

from typing import List, Optional, Protocol

from quizonline.config.logger import configure_logger
from quizonline.domain.models import Question
from quizonline.repository.questions import QuestionStore
from quizonline.utils.exceptions import NotFoundError, ValidationError

logger = configure_logger()


class QuestionServiceProtocol(Protocol):
    """Операции с вопросами, доступные обработчикам API."""

    async def create_question(self, question: Question) -> Question: ...

    async def get_all_questions(self) -> List[Question]: ...

    async def get_question_by_id(self, question_id: int) -> Optional[Question]: ...

    async def get_all_subjects(self) -> List[str]: ...

    async def update_question(
        self,
        question_id: int,
        question: Optional[str] = None,
        choices: Optional[List[str]] = None,
        correct_answers: Optional[List[str]] = None,
    ) -> Question: ...

    async def delete_question(self, question_id: int) -> None: ...

    async def get_questions_for_user(
        self, num_of_questions: int, subject: str
    ) -> List[Question]: ...


class QuestionService:
    """Сервис для работы с вопросами."""

    def __init__(self, store: QuestionStore):
        self.store = store

    async def create_question(self, question: Question) -> Question:
        """Создать новый вопрос."""
        logger.info(f"Создание нового вопроса по предмету '{question.subject}'")
        created = await self.store.save(question)
        logger.info(f"✅ Вопрос {created.id} создан")
        return created

    async def get_all_questions(self) -> List[Question]:
        """Получить список всех вопросов."""
        logger.debug("Получение списка всех вопросов")
        return await self.store.find_all()

    async def get_question_by_id(self, question_id: int) -> Optional[Question]:
        """Получить вопрос по ID."""
        logger.debug(f"Получение вопроса с ID: {question_id}")
        return await self.store.find_by_id(question_id)

    async def get_all_subjects(self) -> List[str]:
        """Получить список уникальных предметов."""
        logger.debug("Получение списка предметов")
        return await self.store.find_distinct_subjects()

    async def update_question(
        self,
        question_id: int,
        question: Optional[str] = None,
        choices: Optional[List[str]] = None,
        correct_answers: Optional[List[str]] = None,
    ) -> Question:
        """
        Обновить вопрос.

        Перезаписываются только текст, варианты и правильные ответы; предмет и
        тип вопроса остаются прежними. Незаданные (None) поля не меняются.

        Raises:
            NotFoundError: Вопрос с таким ID не существует
        """
        logger.info(f"Обновление вопроса {question_id}")

        existing_question = await self.store.find_by_id(question_id)
        if existing_question is None:
            logger.warning(f"Вопрос с ID {question_id} не найден")
            raise NotFoundError(resource_type="Question", resource_id=question_id)

        if question is not None:
            existing_question.question = question
        if choices is not None:
            existing_question.choices = choices
        if correct_answers is not None:
            existing_question.correct_answers = correct_answers

        return await self.store.save(existing_question)

    async def delete_question(self, question_id: int) -> None:
        """Удалить вопрос. Отсутствующий вопрос ошибкой не считается."""
        logger.info(f"Удаление вопроса {question_id}")
        await self.store.delete_by_id(question_id)

    async def get_questions_for_user(
        self, num_of_questions: int, subject: str
    ) -> List[Question]:
        """
        Получить не более ``num_of_questions`` вопросов по предмету.

        Raises:
            ValidationError: Запрошено меньше одного вопроса
        """
        if num_of_questions < 1:
            raise ValidationError(
                detail="Количество вопросов должно быть не меньше 1",
                fields=["numOfQuestions"],
            )
        logger.debug(
            f"Получение {num_of_questions} вопросов по предмету '{subject}' для пользователя"
        )
        return await self.store.find_by_subject(subject, num_of_questions)

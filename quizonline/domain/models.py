# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
ORM-модели домена QuizOnline.

Вопрос хранится в таблице ``questions``; варианты ответов и правильные ответы
лежат в отдельных таблицах, принадлежащих вопросу, с сохранением порядка
через колонку ``position``. Наружу коллекции видны как обычные списки строк.
"""

from typing import List

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Базовый класс для всех моделей."""


class QuestionChoice(Base):
    """Вариант ответа на вопрос."""

    __tablename__ = "question_choices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self):
        return f"<QuestionChoice(question_id={self.question_id}, position={self.position})>"


class QuestionCorrectAnswer(Base):
    """Правильный ответ на вопрос."""

    __tablename__ = "question_correct_answers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self):
        return f"<QuestionCorrectAnswer(question_id={self.question_id}, position={self.position})>"


class Question(Base):
    """Вопрос викторины."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    question_type: Mapped[str] = mapped_column(String(64), nullable=False)

    # Коллекции всегда загружаются сразу: в async-сессии ленивой загрузки нет
    choice_items: Mapped[List[QuestionChoice]] = relationship(
        order_by=QuestionChoice.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    correct_answer_items: Mapped[List[QuestionCorrectAnswer]] = relationship(
        order_by=QuestionCorrectAnswer.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    choices: AssociationProxy[List[str]] = association_proxy(
        "choice_items", "value", creator=lambda value: QuestionChoice(value=value)
    )
    correct_answers: AssociationProxy[List[str]] = association_proxy(
        "correct_answer_items",
        "value",
        creator=lambda value: QuestionCorrectAnswer(value=value),
    )

    def __repr__(self):
        return f"<Question(id={self.id}, subject={self.subject}, text={self.question[:20]})>"

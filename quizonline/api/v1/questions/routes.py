# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Главный роутер для работы с вопросами.
"""

from fastapi import APIRouter

from .crud import create_router, delete_router, read_router, update_router
from .quiz import router as quiz_router

# Создаем главный роутер
router = APIRouter()

# Подключаем все подроутеры
router.include_router(create_router)
router.include_router(read_router)
router.include_router(update_router)
router.include_router(delete_router)
router.include_router(quiz_router)

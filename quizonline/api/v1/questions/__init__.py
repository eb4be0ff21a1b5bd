# -*- coding: utf-8 -*-
"""
QuizOnline/quizonline/api/v1/questions/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
API вопросов викторины.
"""

from .routes import router

__all__ = ["router"]

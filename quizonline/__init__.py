# -*- coding: utf-8 -*-
"""
QuizOnline: REST API для управления вопросами викторин.
"""

__version__ = "0.1.0"

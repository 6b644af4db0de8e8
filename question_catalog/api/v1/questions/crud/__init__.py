# -*- coding: utf-8 -*-
"""
question_catalog/api/v1/questions/crud/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Роутеры чтения каталога вопросов.
"""

from .read import router as read_router

__all__ = ["read_router"]

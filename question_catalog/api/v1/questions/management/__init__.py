# -*- coding: utf-8 -*-
"""
Роутеры управления прогрессом и статистики вопросов.
"""

from .progress import router as progress_router
from .stats import router as stats_router

__all__ = ["progress_router", "stats_router"]

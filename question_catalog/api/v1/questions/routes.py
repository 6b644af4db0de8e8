# -*- coding: utf-8 -*-
"""
question_catalog/api/v1/questions/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Корневой роутер каталога вопросов.
"""

from fastapi import APIRouter

from .crud import read_router
from .management import progress_router, stats_router

router = APIRouter()

# Статистика подключается раньше маршрутов с {question_id}
router.include_router(stats_router)
router.include_router(read_router)
router.include_router(progress_router)

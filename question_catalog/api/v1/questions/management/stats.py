# -*- coding: utf-8 -*-
"""
Сводная статистика по каталогу вопросов.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from question_catalog.clients.database_client import get_db
from question_catalog.service.questions import get_stats_overview_service

from ..shared.schemas import ApiResponse, StatsOverviewSchema

router = APIRouter(prefix="/questions", tags=["📚 Вопросы - 📊 Статистика"])


@router.get("/stats/overview", response_model=ApiResponse[StatsOverviewSchema])
async def stats_overview_endpoint(session: AsyncSession = Depends(get_db)):
    """Общий прогресс, разбивка по сложности и по шагам."""
    stats = await get_stats_overview_service(session)
    return ApiResponse[StatsOverviewSchema](
        data=StatsOverviewSchema.model_validate(stats)
    )

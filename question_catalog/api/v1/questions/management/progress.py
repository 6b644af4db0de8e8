# -*- coding: utf-8 -*-
"""
Отметки прогресса по вопросу: решён / на повторении.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from question_catalog.clients.database_client import get_db
from question_catalog.service.questions import (toggle_completed_service,
                                                toggle_review_service)

from ..shared.schemas import (ApiMessageResponse, CompletedToggleSchema,
                              ReviewToggleSchema)

router = APIRouter(prefix="/questions", tags=["📚 Вопросы - ✅ Прогресс"])


@router.put(
    "/{question_id}/completed",
    response_model=ApiMessageResponse[CompletedToggleSchema],
)
async def toggle_completed_endpoint(
    question_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Переключить признак решённого вопроса."""
    question = await toggle_completed_service(session, question_id)
    state = "completed" if question.completed else "not completed"
    return ApiMessageResponse[CompletedToggleSchema](
        message=f"Question marked as {state}",
        data=CompletedToggleSchema(id=question.id, completed=question.completed),
    )


@router.put(
    "/{question_id}/review",
    response_model=ApiMessageResponse[ReviewToggleSchema],
)
async def toggle_review_endpoint(
    question_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Переключить отметку «на повторение»."""
    question = await toggle_review_service(session, question_id)
    message = (
        "Question marked for review"
        if question.review
        else "Question removed from review"
    )
    return ApiMessageResponse[ReviewToggleSchema](
        message=message,
        data=ReviewToggleSchema(id=question.id, review=question.review),
    )

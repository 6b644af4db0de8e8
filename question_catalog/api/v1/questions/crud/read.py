# -*- coding: utf-8 -*-
"""
Чтение каталога вопросов: список с поиском и пагинацией, вопрос по ID.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from question_catalog.clients.database_client import get_db
from question_catalog.repository.questions import (DEFAULT_SORT,
                                                   QuestionFilterParams,
                                                   parse_bool_flag)
from question_catalog.service.questions import (get_question_service,
                                                list_questions_service)

from ..shared.schemas import (ApiResponse, QuestionListSchema,
                              QuestionReadSchema)

# Верхняя граница целочисленных параметров (int32), чтобы смещение помещалось в BIGINT
MAX_QUERY_INT = 2**31 - 1

router = APIRouter(prefix="/questions", tags=["📚 Вопросы - 📖 Чтение"])


@router.get("", response_model=ApiResponse[QuestionListSchema])
async def list_questions_endpoint(
    page: int = Query(1, ge=1, le=MAX_QUERY_INT, description="Номер страницы"),
    limit: int = Query(
        10, ge=1, le=MAX_QUERY_INT, description="Размер страницы"
    ),
    search: str = Query(
        "",
        description="Поиск по названию вопроса, шага или подшага (без учёта регистра)",
    ),
    step_no: Optional[int] = Query(
        None,
        ge=-MAX_QUERY_INT,
        le=MAX_QUERY_INT,
        description="Фильтр по номеру шага",
    ),
    difficulty: Optional[int] = Query(
        None, ge=0, le=2, description="0 - Easy, 1 - Medium, 2 - Hard"
    ),
    completed: Optional[str] = Query(
        None, description='"true" - решённые, любое другое значение - нерешённые'
    ),
    review: Optional[str] = Query(
        None, description='"true" - на повторении, любое другое значение - нет'
    ),
    sort: str = Query(
        DEFAULT_SORT,
        description='Поля через запятую, "-" перед полем - по убыванию',
    ),
    session: AsyncSession = Depends(get_db),
):
    """Получить страницу вопросов с поиском, фильтрами и сортировкой."""
    params = QuestionFilterParams(
        search=search,
        step_no=step_no,
        difficulty=difficulty,
        completed=parse_bool_flag(completed),
        review=parse_bool_flag(review),
    )
    data = await list_questions_service(
        session, params=params, sort=sort, page=page, limit=limit
    )
    return ApiResponse[QuestionListSchema](
        data=QuestionListSchema.model_validate(data, from_attributes=True)
    )


@router.get("/{question_id}", response_model=ApiResponse[QuestionReadSchema])
async def get_question_endpoint(
    question_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Получить один вопрос по бизнес-идентификатору."""
    question = await get_question_service(session, question_id)
    return ApiResponse[QuestionReadSchema](
        data=QuestionReadSchema.model_validate(question)
    )

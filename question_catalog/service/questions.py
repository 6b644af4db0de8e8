# -*- coding: utf-8 -*-
"""
question_catalog/service/questions.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисные операции каталога вопросов: список с пагинацией, получение по
идентификатору, переключение флагов и сводная статистика.

Ошибки SQLAlchemy превращаются в ``StoreFailureError``, отсутствующий вопрос -
в ``NotFoundError``.
"""

from __future__ import annotations

import math
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from question_catalog.config.logger import configure_logger
from question_catalog.domain.enums import Difficulty
from question_catalog.domain.models import Question
from question_catalog.repository.questions import (QuestionFilterParams,
                                                   build_order_by,
                                                   build_question_filter,
                                                   count_by_difficulty,
                                                   count_by_step,
                                                   count_questions,
                                                   get_question,
                                                   list_questions,
                                                   parse_sort_spec,
                                                   toggle_flag)
from question_catalog.utils.exceptions import NotFoundError, StoreFailureError

logger = configure_logger()

# Сообщения для клиента при ошибках хранилища
FETCH_LIST_ERROR = "Error fetching questions"
FETCH_ONE_ERROR = "Error fetching question"
TOGGLE_COMPLETED_ERROR = "Error updating question completion"
TOGGLE_REVIEW_ERROR = "Error updating question review status"
STATS_ERROR = "Error fetching statistics"


def build_pagination(page: int, limit: int, total: int) -> Dict[str, Any]:
    """Метаданные пагинации для ответа списка."""
    total_pages = math.ceil(total / limit)
    return {
        "current_page": page,
        "total_pages": total_pages,
        "total_questions": total,
        "questions_per_page": limit,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }


def completion_percentage(completed: int, total: int) -> int:
    """Процент решённых вопросов, округлённый до целого (половина - вверх).

    Для пустого каталога возвращает 0.
    """
    if total == 0:
        return 0
    return math.floor(completed * 100 / total + 0.5)


async def list_questions_service(
    session: AsyncSession,
    *,
    params: QuestionFilterParams,
    sort: str,
    page: int,
    limit: int,
) -> Dict[str, Any]:
    """Список вопросов с поиском, фильтрами, сортировкой и пагинацией."""
    clauses = build_question_filter(params)
    order_by = build_order_by(parse_sort_spec(sort))
    skip = (page - 1) * limit

    try:
        total = await count_questions(session, clauses)
        questions = await list_questions(
            session, clauses, order_by, skip=skip, limit=limit
        )
    except SQLAlchemyError as exc:
        logger.error(f"❌ Ошибка получения списка вопросов: {exc}")
        raise StoreFailureError(FETCH_LIST_ERROR, str(exc)) from exc

    return {
        "questions": questions,
        "pagination": build_pagination(page, limit, total),
    }


async def get_question_service(session: AsyncSession, question_id: str) -> Question:
    """Вопрос по бизнес-идентификатору."""
    try:
        question = await get_question(session, question_id)
    except SQLAlchemyError as exc:
        logger.error(f"❌ Ошибка получения вопроса {question_id}: {exc}")
        raise StoreFailureError(FETCH_ONE_ERROR, str(exc)) from exc

    if question is None:
        raise NotFoundError("Question", question_id)
    return question


async def _toggle_service(
    session: AsyncSession, question_id: str, flag: str, error_message: str
) -> Question:
    try:
        question = await get_question(session, question_id)
        if question is None:
            raise NotFoundError("Question", question_id)
        return await toggle_flag(session, question, flag)
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error(f"❌ Ошибка переключения {flag} для вопроса {question_id}: {exc}")
        raise StoreFailureError(error_message, str(exc)) from exc


async def toggle_completed_service(
    session: AsyncSession, question_id: str
) -> Question:
    """Инвертирует признак ``completed``."""
    return await _toggle_service(
        session, question_id, "completed", TOGGLE_COMPLETED_ERROR
    )


async def toggle_review_service(session: AsyncSession, question_id: str) -> Question:
    """Инвертирует признак ``review``."""
    return await _toggle_service(session, question_id, "review", TOGGLE_REVIEW_ERROR)


async def get_stats_overview_service(session: AsyncSession) -> Dict[str, Any]:
    """
    Сводная статистика по всему каталогу.

    Returns:
        Словарь с ключами ``overview``, ``difficulty_breakdown`` и
        ``step_breakdown``.
    """
    try:
        total = await count_questions(session)
        completed = await count_questions(session, [Question.completed.is_(True)])
        review = await count_questions(session, [Question.review.is_(True)])
        by_difficulty = await count_by_difficulty(session)
        by_step = await count_by_step(session)
    except SQLAlchemyError as exc:
        logger.error(f"❌ Ошибка расчёта статистики: {exc}")
        raise StoreFailureError(STATS_ERROR, str(exc)) from exc

    return {
        "overview": {
            "total": total,
            "completed": completed,
            "review": review,
            "remaining": total - completed,
            "completion_percentage": completion_percentage(completed, total),
        },
        "difficulty_breakdown": [
            {"difficulty": Difficulty(value).label, "count": count}
            for value, count in by_difficulty
        ],
        "step_breakdown": by_step,
    }

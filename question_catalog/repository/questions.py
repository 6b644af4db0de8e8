# -*- coding: utf-8 -*-
"""
question_catalog/repository/questions.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Операции с хранилищем для каталога вопросов.

Построение фильтра и сортировки вынесено в чистые функции
(``build_question_filter``, ``parse_sort_spec``), чтобы их можно было
тестировать без базы данных.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from question_catalog.config.logger import configure_logger
from question_catalog.domain.enums import SortDirection
from question_catalog.domain.models import Question, utcnow

logger = configure_logger()

DEFAULT_SORT = "sl_no"

# Поля, по которым ищет текстовый поиск
SEARCH_FIELDS = ("question_title", "step_title", "sub_step_title")

# Поля, по которым разрешена сортировка
SORTABLE_FIELDS = frozenset(
    {
        "id",
        "step_no",
        "sub_step_no",
        "sl_no",
        "step_title",
        "sub_step_title",
        "question_title",
        "difficulty",
        "completed",
        "review",
        "created_at",
        "updated_at",
    }
)

# Поля, которые обновляются при повторном импорте (прогресс не трогаем)
CONTENT_FIELDS = (
    "step_no",
    "sub_step_no",
    "sl_no",
    "step_title",
    "sub_step_title",
    "question_title",
    "post_link",
    "yt_link",
    "plus_link",
    "editorial_link",
    "lc_link",
    "company_tags",
    "difficulty",
    "ques_topic",
)


@dataclass(frozen=True)
class QuestionFilterParams:
    """Разобранные параметры фильтрации списка вопросов."""

    search: str = ""
    step_no: Optional[int] = None
    difficulty: Optional[int] = None
    completed: Optional[bool] = None
    review: Optional[bool] = None


def parse_bool_flag(value: Optional[str]) -> Optional[bool]:
    """Преобразует текстовый флаг из query-параметра.

    ``None`` - параметр не передан, фильтра нет. Истиной считается только
    строка ``"true"``; любое другое значение означает ``False``.
    """
    if value is None:
        return None
    return value == "true"


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_question_filter(params: QuestionFilterParams) -> List[ColumnElement]:
    """Строит список условий (конъюнкцию) по параметрам запроса.

    Пустой список означает отсутствие фильтра.
    """
    clauses: List[ColumnElement] = []

    if params.search:
        pattern = f"%{_escape_like(params.search)}%"
        clauses.append(
            or_(
                *(
                    getattr(Question, field).ilike(pattern, escape="\\")
                    for field in SEARCH_FIELDS
                )
            )
        )

    if params.step_no is not None:
        clauses.append(Question.step_no == params.step_no)
    if params.difficulty is not None:
        clauses.append(Question.difficulty == params.difficulty)
    if params.completed is not None:
        clauses.append(Question.completed.is_(params.completed))
    if params.review is not None:
        clauses.append(Question.review.is_(params.review))

    return clauses


def parse_sort_spec(sort: Optional[str]) -> List[Tuple[str, SortDirection]]:
    """Разбирает строку сортировки вида ``"step_no,-sl_no"``.

    Префикс ``-`` означает убывание. Неизвестные поля пропускаются; если
    не осталось ни одного поля, используется сортировка по ``sl_no``.
    """
    spec: List[Tuple[str, SortDirection]] = []
    for raw_field in (sort or "").split(","):
        field = raw_field.strip()
        if not field:
            continue
        direction = SortDirection.ASC
        if field.startswith("-"):
            field = field[1:].strip()
            direction = SortDirection.DESC
        if field not in SORTABLE_FIELDS:
            logger.warning(f"⚠️ Неизвестное поле сортировки пропущено: {field!r}")
            continue
        spec.append((field, direction))

    if not spec:
        spec.append((DEFAULT_SORT, SortDirection.ASC))
    return spec


def build_order_by(spec: Iterable[Tuple[str, SortDirection]]) -> List[ColumnElement]:
    """Преобразует разобранную сортировку в выражения ORDER BY."""
    order_by = []
    for field, direction in spec:
        column = getattr(Question, field)
        order_by.append(column.desc() if direction is SortDirection.DESC else column.asc())
    return order_by


async def count_questions(
    session: AsyncSession, clauses: Iterable[ColumnElement] = ()
) -> int:
    """Количество вопросов, удовлетворяющих условиям."""
    stmt = select(func.count(Question.pk)).where(*clauses)
    return await session.scalar(stmt) or 0


async def list_questions(
    session: AsyncSession,
    clauses: Iterable[ColumnElement],
    order_by: Iterable[ColumnElement],
    *,
    skip: int = 0,
    limit: int = 10,
) -> List[Question]:
    """Страница вопросов с учётом фильтра и сортировки."""
    logger.debug(f"Запрос вопросов: skip={skip}, limit={limit}")
    stmt = (
        select(Question)
        .where(*clauses)
        .order_by(*order_by)
        .offset(skip)
        .limit(limit)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_question(session: AsyncSession, question_id: str) -> Optional[Question]:
    """Получить вопрос по бизнес-идентификатору."""
    logger.debug(f"Получение вопроса: id={question_id}")
    result = await session.execute(select(Question).where(Question.id == question_id))
    return result.scalars().first()


async def toggle_flag(session: AsyncSession, question: Question, flag: str) -> Question:
    """Инвертирует булев флаг вопроса (``completed`` или ``review``) и сохраняет."""
    setattr(question, flag, not getattr(question, flag))
    question.updated_at = utcnow()
    await session.commit()
    await session.refresh(question)
    logger.info(f"Вопрос {question.id}: {flag}={getattr(question, flag)}")
    return question


async def count_by_difficulty(session: AsyncSession) -> List[Tuple[int, int]]:
    """Количество вопросов по каждому значению сложности."""
    stmt = (
        select(Question.difficulty, func.count(Question.pk))
        .group_by(Question.difficulty)
        .order_by(Question.difficulty)
    )
    result = await session.execute(stmt)
    return [(difficulty, count) for difficulty, count in result.all()]


async def count_by_step(session: AsyncSession) -> List[Dict[str, int]]:
    """Количество вопросов, решённых и отмеченных на повторение, по шагам."""
    stmt = (
        select(
            Question.step_no,
            func.count(Question.pk).label("count"),
            func.sum(case((Question.completed.is_(True), 1), else_=0)).label(
                "completed"
            ),
            func.sum(case((Question.review.is_(True), 1), else_=0)).label("review"),
        )
        .group_by(Question.step_no)
        .order_by(Question.step_no.asc())
    )
    result = await session.execute(stmt)
    return [
        {
            "step_no": row["step_no"],
            "count": row["count"],
            "completed": int(row["completed"] or 0),
            "review": int(row["review"] or 0),
        }
        for row in result.mappings().all()
    ]


async def upsert_questions(
    session: AsyncSession, records: Iterable[Dict[str, Any]]
) -> Tuple[int, int]:
    """Вставляет новые вопросы и обновляет содержимое существующих по ``id``.

    Флаги ``completed`` и ``review`` у существующих вопросов не меняются.

    Returns:
        Кортеж ``(created, updated)``.
    """
    created = updated = 0
    for record in records:
        existing = await get_question(session, record["id"])
        if existing is None:
            session.add(Question(**record))
            created += 1
            continue
        for field in CONTENT_FIELDS:
            if field in record:
                setattr(existing, field, record[field])
        updated += 1
    await session.commit()
    logger.info(f"Импорт вопросов: создано={created}, обновлено={updated}")
    return created, updated

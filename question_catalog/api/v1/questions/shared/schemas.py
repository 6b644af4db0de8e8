# -*- coding: utf-8 -*-
"""
question_catalog/api/v1/questions/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic-схемы каталога вопросов.
"""

from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from question_catalog.domain.enums import Difficulty

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Конверт успешного ответа API."""

    success: bool = True
    data: T


class ApiMessageResponse(ApiResponse[T], Generic[T]):
    """Конверт успешного ответа с сообщением."""

    message: str


class QuestionBaseSchema(BaseModel):
    """Поля содержимого вопроса."""

    id: str = Field(..., min_length=1, description="Бизнес-идентификатор вопроса")
    step_no: int = Field(..., description="Номер шага")
    sub_step_no: int = Field(..., description="Номер подшага")
    sl_no: int = Field(..., description="Порядковый номер в каталоге")
    step_title: str
    sub_step_title: str
    question_title: str
    post_link: str
    yt_link: Optional[str] = None
    plus_link: Optional[str] = None
    editorial_link: Optional[str] = None
    lc_link: Optional[str] = None
    company_tags: Optional[List[str]] = None
    difficulty: Difficulty = Field(..., description="0 - Easy, 1 - Medium, 2 - Hard")
    ques_topic: List[Any] = Field(..., description="Темы вопроса")


class QuestionSeedSchema(QuestionBaseSchema):
    """Схема записи для импорта вопросов."""

    model_config = ConfigDict(extra="ignore")


class QuestionReadSchema(QuestionBaseSchema):
    """Схема чтения вопроса."""

    review: bool = False
    completed: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationSchema(CamelSchema):
    """Метаданные пагинации."""

    current_page: int
    total_pages: int
    total_questions: int
    questions_per_page: int
    has_next_page: bool
    has_prev_page: bool


class QuestionListSchema(BaseModel):
    questions: List[QuestionReadSchema]
    pagination: PaginationSchema


class CompletedToggleSchema(BaseModel):
    id: str
    completed: bool


class ReviewToggleSchema(BaseModel):
    id: str
    review: bool


class OverviewSchema(CamelSchema):
    """Общие показатели прогресса."""

    total: int
    completed: int
    review: int
    remaining: int
    completion_percentage: int


class DifficultyCountSchema(BaseModel):
    difficulty: str
    count: int


class StepCountSchema(BaseModel):
    step_no: int
    count: int
    completed: int
    review: int


class StatsOverviewSchema(CamelSchema):
    """Сводная статистика каталога."""

    overview: OverviewSchema
    difficulty_breakdown: List[DifficultyCountSchema]
    step_breakdown: List[StepCountSchema]

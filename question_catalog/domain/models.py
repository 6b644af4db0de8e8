# -*- coding: utf-8 -*-
"""
question_catalog/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
ORM-модели SQLAlchemy для каталога вопросов.
"""

from datetime import datetime, timezone

from sqlalchemy import (JSON, Boolean, CheckConstraint, Column, DateTime,
                        Integer, String, Text)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Question(Base):
    """Вопрос каталога.

    ``pk`` - служебный первичный ключ хранилища, наружу не отдаётся.
    ``id`` - бизнес-идентификатор вопроса, по нему работает API.
    """

    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint(
            "difficulty >= 0 AND difficulty <= 2", name="ck_questions_difficulty"
        ),
    )

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(255), unique=True, index=True, nullable=False)

    step_no = Column(Integer, nullable=False, index=True)
    sub_step_no = Column(Integer, nullable=False)
    sl_no = Column(Integer, nullable=False, index=True)

    step_title = Column(Text, nullable=False)
    sub_step_title = Column(Text, nullable=False)
    question_title = Column(Text, nullable=False)
    post_link = Column(Text, nullable=False)

    review = Column(Boolean, nullable=False, default=False)
    completed = Column(Boolean, nullable=False, default=False)

    yt_link = Column(Text, nullable=True)
    plus_link = Column(Text, nullable=True)
    editorial_link = Column(Text, nullable=True)
    lc_link = Column(Text, nullable=True)
    company_tags = Column(JSON, nullable=True)  # список строк

    difficulty = Column(Integer, nullable=False)  # 0: Easy, 1: Medium, 2: Hard
    ques_topic = Column(JSON, nullable=False)  # список произвольных объектов

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return f"<Question id={self.id!r} sl_no={self.sl_no}>"

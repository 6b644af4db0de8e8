# -*- coding: utf-8 -*-
"""
question_catalog/domain/enums.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена каталога вопросов.
"""

import enum


class Difficulty(enum.IntEnum):
    """Сложность вопроса. В базе хранится числовым значением."""

    EASY = 0
    MEDIUM = 1
    HARD = 2

    @property
    def label(self) -> str:
        """Название сложности для ответов API ("Easy", "Medium", "Hard")."""
        return self.name.capitalize()


class SortDirection(str, enum.Enum):
    """Направление сортировки списка вопросов."""

    ASC = "asc"
    DESC = "desc"

# -*- coding: utf-8 -*-
"""
Unit тесты для построения фильтра, сортировки и пагинации
"""
import pytest

from question_catalog.domain.enums import Difficulty, SortDirection
from question_catalog.repository.questions import (QuestionFilterParams,
                                                   build_order_by,
                                                   build_question_filter,
                                                   parse_bool_flag,
                                                   parse_sort_spec)
from question_catalog.service.questions import (build_pagination,
                                                completion_percentage)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("true", True),
        ("false", False),
        ("True", False),
        ("1", False),
        ("yes", False),
        ("", False),
    ],
)
def test_parse_bool_flag(value, expected):
    assert parse_bool_flag(value) is expected


def test_empty_params_build_no_clauses():
    assert build_question_filter(QuestionFilterParams()) == []


def test_each_present_param_adds_one_clause():
    params = QuestionFilterParams(
        search="two", step_no=1, difficulty=2, completed=False, review=True
    )
    assert len(build_question_filter(params)) == 5


def test_search_clause_covers_all_title_fields():
    (clause,) = build_question_filter(QuestionFilterParams(search="sum"))
    sql = str(clause)
    assert "question_title" in sql
    assert "sub_step_title" in sql
    assert " OR " in sql


def test_zero_valued_filters_are_applied():
    params = QuestionFilterParams(step_no=0, difficulty=0)
    assert len(build_question_filter(params)) == 2


def test_parse_sort_spec_default():
    assert parse_sort_spec("") == [("sl_no", SortDirection.ASC)]
    assert parse_sort_spec(None) == [("sl_no", SortDirection.ASC)]


def test_parse_sort_spec_descending_and_compound():
    assert parse_sort_spec("-sl_no") == [("sl_no", SortDirection.DESC)]
    assert parse_sort_spec("step_no, -sl_no") == [
        ("step_no", SortDirection.ASC),
        ("sl_no", SortDirection.DESC),
    ]


def test_parse_sort_spec_skips_unknown_fields():
    assert parse_sort_spec("bogus,,-difficulty") == [
        ("difficulty", SortDirection.DESC)
    ]
    assert parse_sort_spec("bogus") == [("sl_no", SortDirection.ASC)]


def test_build_order_by_keeps_listed_order():
    order_by = build_order_by(
        [("step_no", SortDirection.ASC), ("sl_no", SortDirection.DESC)]
    )
    assert [str(item) for item in order_by] == [
        "questions.step_no ASC",
        "questions.sl_no DESC",
    ]


@pytest.mark.parametrize(
    "page, limit, total, total_pages, has_next, has_prev",
    [
        (1, 10, 25, 3, True, False),
        (3, 10, 25, 3, False, True),
        (1, 10, 0, 0, False, False),
        (2, 10, 0, 0, False, True),
        (1, 5, 5, 1, False, False),
    ],
)
def test_build_pagination(page, limit, total, total_pages, has_next, has_prev):
    pagination = build_pagination(page, limit, total)
    assert pagination["total_pages"] == total_pages
    assert pagination["has_next_page"] is has_next
    assert pagination["has_prev_page"] is has_prev
    assert pagination["total_questions"] == total
    assert pagination["questions_per_page"] == limit
    assert pagination["current_page"] == page


@pytest.mark.parametrize(
    "completed, total, expected",
    [(0, 0, 0), (1, 2, 50), (1, 3, 33), (2, 3, 67), (1, 8, 13), (5, 5, 100)],
)
def test_completion_percentage(completed, total, expected):
    assert completion_percentage(completed, total) == expected


def test_difficulty_labels():
    assert [d.label for d in Difficulty] == ["Easy", "Medium", "Hard"]

# -*- coding: utf-8 -*-
"""
Integration тесты для сводной статистики
"""

import pytest
from httpx import AsyncClient

from tests.factories import create_questions, question_payload


class TestStatsOverview:
    """GET /api/questions/stats/overview"""

    @pytest.mark.asyncio
    async def test_empty_catalog_reports_zero_percent(self, client: AsyncClient):
        response = await client.get("/api/questions/stats/overview")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {
                "overview": {
                    "total": 0,
                    "completed": 0,
                    "review": 0,
                    "remaining": 0,
                    "completionPercentage": 0,
                },
                "difficultyBreakdown": [],
                "stepBreakdown": [],
            },
        }

    @pytest.mark.asyncio
    async def test_breakdown_by_step_and_difficulty(
        self, client: AsyncClient, test_session
    ):
        await create_questions(
            test_session,
            [
                # step 2 добавлен первым, чтобы проверить сортировку по step_no
                question_payload(4, step_no=2, difficulty=2, completed=True),
                question_payload(5, step_no=2, difficulty=1, review=True),
                question_payload(1, step_no=1, difficulty=0, completed=True),
                question_payload(2, step_no=1, difficulty=0, completed=True),
                question_payload(3, step_no=1, difficulty=1),
            ],
        )

        response = await client.get("/api/questions/stats/overview")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["overview"] == {
            "total": 5,
            "completed": 3,
            "review": 1,
            "remaining": 2,
            "completionPercentage": 60,
        }
        assert data["difficultyBreakdown"] == [
            {"difficulty": "Easy", "count": 2},
            {"difficulty": "Medium", "count": 2},
            {"difficulty": "Hard", "count": 1},
        ]
        assert data["stepBreakdown"] == [
            {"step_no": 1, "count": 3, "completed": 2, "review": 0},
            {"step_no": 2, "count": 2, "completed": 1, "review": 1},
        ]

    @pytest.mark.asyncio
    async def test_breakdowns_sum_to_total(self, client: AsyncClient, test_session):
        await create_questions(
            test_session,
            [
                question_payload(
                    n,
                    step_no=n % 4,
                    difficulty=n % 3,
                    completed=n % 2 == 0,
                    review=n % 5 == 0,
                )
                for n in range(1, 31)
            ],
        )

        data = (await client.get("/api/questions/stats/overview")).json()["data"]

        overview = data["overview"]
        assert overview["remaining"] == overview["total"] - overview["completed"]
        assert sum(item["count"] for item in data["difficultyBreakdown"]) == 30
        assert sum(item["count"] for item in data["stepBreakdown"]) == 30
        assert sum(item["completed"] for item in data["stepBreakdown"]) == 15
        assert sum(item["review"] for item in data["stepBreakdown"]) == 6
        assert [item["step_no"] for item in data["stepBreakdown"]] == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_stats_follow_toggles(self, client: AsyncClient, test_session):
        await create_questions(test_session, [question_payload(1)])

        await client.put("/api/questions/q-1/completed")
        overview = (await client.get("/api/questions/stats/overview")).json()[
            "data"
        ]["overview"]

        assert overview["completed"] == 1
        assert overview["completionPercentage"] == 100

# -*- coding: utf-8 -*-
"""
End-to-end тесты полного цикла работы с вопросами
"""

import pytest
from httpx import AsyncClient

from tests.fixtures import question_payload

BASE_URL = "/api/quizzes"


class TestQuizFlow:
    """E2E тесты: вопросы → предметы → викторина"""

    async def _create(self, client: AsyncClient, subject: str, text: str) -> dict:
        response = await client.post(
            f"{BASE_URL}/create-new-question",
            json=question_payload(subject=subject, text=text),
        )
        assert response.status_code == 201
        return response.json()

    @pytest.mark.asyncio
    async def test_history_and_math_scenario(self, async_client: AsyncClient):
        """3 вопроса по истории и 2 по математике"""
        history = [
            await self._create(async_client, "History", f"History question {i}")
            for i in range(3)
        ]
        for i in range(2):
            await self._create(async_client, "Math", f"Math question {i}")
        history_ids = {q["id"] for q in history}

        subjects = await async_client.get(f"{BASE_URL}/subjects")
        assert subjects.status_code == 200
        assert len(subjects.json()) == 2
        assert set(subjects.json()) == {"History", "Math"}

        all_history = await async_client.get(
            f"{BASE_URL}/quiz/fetch-question-for-user",
            params={"numOfQuestions": 5, "subject": "History"},
        )
        assert all_history.status_code == 200
        assert {q["id"] for q in all_history.json()} == history_ids

        for _ in range(5):
            two = await async_client.get(
                f"{BASE_URL}/quiz/fetch-question-for-user",
                params={"numOfQuestions": 2, "subject": "History"},
            )
            assert two.status_code == 200
            ids = [q["id"] for q in two.json()]
            assert len(ids) == 2
            assert len(set(ids)) == 2
            assert set(ids) <= history_ids

    @pytest.mark.asyncio
    async def test_question_lifecycle(self, async_client: AsyncClient):
        """Создание → чтение → обновление → удаление"""
        created = await self._create(async_client, "Math", "2+2?")
        question_url = f"{BASE_URL}/question/{created['id']}"

        fetched = await async_client.get(question_url)
        assert fetched.status_code == 200
        assert fetched.json() == created

        updated = await async_client.put(
            f"{question_url}/update",
            json={"text": "3+3?", "choices": ["5", "6"], "correctAnswers": ["6"]},
        )
        assert updated.status_code == 200
        assert updated.json()["subject"] == created["subject"]
        assert updated.json()["questionType"] == created["questionType"]
        assert updated.json()["choices"] == ["5", "6"]

        listed = await async_client.get(f"{BASE_URL}/all-questions")
        assert [q["text"] for q in listed.json()] == ["3+3?"]

        deleted = await async_client.delete(f"{question_url}/delete")
        assert deleted.status_code == 204

        missing = await async_client.get(question_url)
        assert missing.status_code == 404

        subjects = await async_client.get(f"{BASE_URL}/subjects")
        assert subjects.json() == []

"""
Leaderboard Backend — Score Endpoint Tests
============================================

What:  End-to-end tests for POST/GET /api/scores.
How:   Real FastAPI app over ASGITransport, backed by a throwaway SQLite
       database (see the score_tables fixture in conftest.py).
"""

import pytest

from leaderboard.database import Base, engine


async def submit(client, value):
    response = await client.post("/api/scores", json={"score": value})
    assert response.status_code == 200
    return response.json()


class TestSubmitScore:

    @pytest.mark.asyncio
    async def test_submit_returns_created_score(self, test_client):
        response = await test_client.post("/api/scores", json={"score": 42})

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 42
        assert isinstance(body["id"], int)
        assert set(body) == {"id", "score"}

    @pytest.mark.asyncio
    async def test_missing_score_field_is_a_500(self, test_client):
        response = await test_client.post("/api/scores", json={"points": 42})

        assert response.status_code == 500
        assert response.text == "Error saving score"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_malformed_json_is_a_500(self, test_client):
        response = await test_client.post(
            "/api/scores",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.text == "Error saving score"

    @pytest.mark.asyncio
    async def test_rejected_submission_is_not_stored(self, test_client):
        await test_client.post("/api/scores", json={"score": "lots"})

        response = await test_client.get("/api/scores")
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_identical_submissions_create_distinct_records(self, test_client):
        first = await submit(test_client, 99)
        second = await submit(test_client, 99)

        assert first["id"] != second["id"]

        response = await test_client.get("/api/scores")
        assert [s["id"] for s in response.json()] == [first["id"], second["id"]]


class TestTopScores:

    @pytest.mark.asyncio
    async def test_empty_leaderboard(self, test_client):
        response = await test_client.get("/api/scores")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_scores_ordered_descending(self, test_client):
        for value in (10, 50, 30):
            await submit(test_client, value)

        response = await test_client.get("/api/scores")

        assert response.status_code == 200
        assert [s["score"] for s in response.json()] == [50, 30, 10]

    @pytest.mark.asyncio
    async def test_fewer_than_ten_returns_all(self, test_client):
        for value in (3, 1, 4, 1, 5):
            await submit(test_client, value)

        response = await test_client.get("/api/scores")

        assert len(response.json()) == 5

    @pytest.mark.asyncio
    async def test_more_than_ten_returns_highest_ten(self, test_client):
        values = [7, 120, 3, 88, 15, 64, 0, 42, 99, 23, 51, 5, 76]
        for value in values:
            await submit(test_client, value)

        response = await test_client.get("/api/scores")

        scores = [s["score"] for s in response.json()]
        assert scores == sorted(values, reverse=True)[:10]

    @pytest.mark.asyncio
    async def test_equal_scores_keep_insertion_order(self, test_client):
        early = await submit(test_client, 5)
        await submit(test_client, 7)
        late = await submit(test_client, 5)

        response = await test_client.get("/api/scores")

        assert [s["id"] for s in response.json()][1:] == [early["id"], late["id"]]

    @pytest.mark.asyncio
    async def test_store_failure_is_a_500(self, test_client):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        response = await test_client.get("/api/scores")

        assert response.status_code == 500
        assert response.text == "Error fetching scores"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/scores")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/api/scores", headers={"X-Request-ID": "game-1234"})

        assert response.headers["X-Request-ID"] == "game-1234"

    @pytest.mark.asyncio
    async def test_request_id_on_error_response(self, test_client):
        response = await test_client.post(
            "/api/scores", json={}, headers={"X-Request-ID": "bad-post"}
        )

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "bad-post"

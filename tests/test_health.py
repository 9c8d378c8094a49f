"""
Leaderboard Backend — Health Check Tests
==========================================
"""

import pytest
from unittest.mock import patch

from leaderboard import __version__


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_database_answers(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self, test_client):
        with patch("leaderboard.routes.health.engine") as mock_engine:
            mock_engine.connect.side_effect = ConnectionRefusedError("no database")
            response = await test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"

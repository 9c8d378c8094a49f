"""
Leaderboard Backend — Pydantic Request/Response Schemas
=========================================================

What:  Pydantic models defining the API contract for scores.
Why:   Input parsing, response serialization, and OpenAPI doc generation.
Who:   ScoreService parses request bodies with ScoreCreate; routes declare
       ScoreResponse as their response model.

Design Decision:
    ScoreCreate is validated inside the service (not by FastAPI's body
    injection) so that a bad body fails the same way a failed insert does:
    HTTP 500 "Error saving score", rather than FastAPI's automatic 422.
"""

from pydantic import BaseModel, Field, StrictInt


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ScoreCreate(BaseModel):
    """
    What:  Body of POST /api/scores.

    StrictInt mirrors the integer column: JSON strings, booleans, floats and
    null are rejected instead of being coerced.
    """
    score: StrictInt = Field(description="Score value to record")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ScoreResponse(BaseModel):
    """A persisted score as returned by both score endpoints."""
    id: int = Field(description="Store-generated identifier")
    score: int = Field(description="Submitted score value")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

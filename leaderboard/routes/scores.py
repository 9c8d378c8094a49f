"""
Leaderboard Backend — Score Route Handlers
============================================

What:  Handles POST /api/scores (submit) and GET /api/scores (top ten).
How:   Reads the request, delegates to ScoreService, returns JSON.
Who:   Called by the game frontend when a round ends and when the
       leaderboard is displayed.

Error responses are produced by the ScorePersistenceError handler in
main.py: HTTP 500 with a fixed text/plain body.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.database import get_db_session
from leaderboard.schemas.score import ScoreCreate, ScoreResponse
from leaderboard.services.score_service import score_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Scores"])


def _plain_text_error(description: str, body: str) -> dict:
    return {
        "description": description,
        "content": {"text/plain": {"example": body}},
    }


@router.post(
    "/scores",
    response_model=ScoreResponse,
    responses={
        200: {"description": "Score recorded", "model": ScoreResponse},
        500: _plain_text_error("Body invalid or score could not be saved", "Error saving score"),
    },
    summary="Submit a score",
    description="Records a new score. Every submission creates a new entry.",
    # The body is parsed by the service, so document it here for OpenAPI
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ScoreCreate.model_json_schema()}},
        }
    },
)
async def submit_score(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> ScoreResponse:
    """
    Record a score.

    Why raw body (not a ScoreCreate parameter):
        FastAPI would answer a missing or mistyped `score` with 422. The
        service validates instead, so every bad submission gets the same
        500 "Error saving score" a failed insert gets.
    """
    body = await request.body()
    return await score_service.submit(db=db, body=body)


@router.get(
    "/scores",
    response_model=List[ScoreResponse],
    responses={
        200: {"description": "Up to ten scores, highest first"},
        500: _plain_text_error("Scores could not be read", "Error fetching scores"),
    },
    summary="Top ten scores",
    description=(
        "Returns at most ten scores ordered by value descending. "
        "Equal scores are listed in the order they were submitted."
    ),
)
async def list_top_scores(
    db: AsyncSession = Depends(get_db_session),
) -> List[ScoreResponse]:
    return await score_service.top10(db=db)

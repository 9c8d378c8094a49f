"""
Leaderboard Backend — Score Service
=====================================

What:  The two leaderboard operations: record a score, read the top ten.
Why:   Keeps all store access and failure translation out of the routes.
How:   Works on the request's AsyncSession; every failure is logged with its
       traceback and re-raised as ScorePersistenceError with a fixed message.
Who:   Called by the /api/scores route handlers.

Ordering:
    top10 sorts by score DESC, then id ASC. Equal scores therefore come back
    in insertion order regardless of the database's default ordering.
"""

import logging
from typing import List

from sqlalchemy import asc, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.exceptions import ScorePersistenceError
from leaderboard.models.score import Score
from leaderboard.schemas.score import ScoreCreate, ScoreResponse

logger = logging.getLogger(__name__)

TOP_SCORES_LIMIT = 10


class ScoreService:
    """
    Business logic for score operations.

    Responsibilities:
        - submit(): Parse a request body and insert one Score row
        - top10(): Fetch the highest scores

    Error Handling Strategy:
        Nothing is retried and no partial results are returned. Whatever goes
        wrong (bad JSON, missing field, lost connection, failed commit) the
        caller sees the same ScorePersistenceError message.
    """

    async def submit(self, db: AsyncSession, body: bytes) -> ScoreResponse:
        """
        Persist a new score from a raw JSON request body.

        Args:
            db: Async database session (injected by FastAPI)
            body: Raw request body, expected to be `{"score": <int>}`

        Returns:
            ScoreResponse with the generated id

        Raises:
            ScorePersistenceError: Body did not parse or the insert failed
        """
        try:
            payload = ScoreCreate.model_validate_json(body)

            score = Score(score=payload.score)
            db.add(score)
            # Commit here rather than in get_db_session so a failed commit
            # still surfaces as "Error saving score"
            await db.commit()
            logger.info("Score recorded: id=%s score=%d", score.id, score.score)

            return ScoreResponse.model_validate(score)

        except Exception as e:
            logger.error("Error saving score: %s", str(e), exc_info=True)
            raise ScorePersistenceError(
                message=ScorePersistenceError.SAVE_FAILED,
                context={"error_type": type(e).__name__},
            )

    async def top10(self, db: AsyncSession) -> List[ScoreResponse]:
        """
        Return up to ten scores, highest first.

        Query plan:
            SELECT id, score FROM scores ORDER BY score DESC, id ASC LIMIT 10
            → idx_scores_score serves the ordering

        Raises:
            ScorePersistenceError: Query execution failed
        """
        try:
            result = await db.execute(
                select(Score)
                .order_by(desc(Score.score), asc(Score.id))
                .limit(TOP_SCORES_LIMIT)
            )
            return [ScoreResponse.model_validate(row) for row in result.scalars().all()]

        except Exception as e:
            logger.error("Error fetching scores: %s", str(e), exc_info=True)
            raise ScorePersistenceError(
                message=ScorePersistenceError.FETCH_FAILED,
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
# ScoreService is stateless; one instance serves every request
score_service = ScoreService()

"""
Leaderboard Backend — Score SQLAlchemy Model
==============================================

What:  ORM model representing the `scores` table.
Why:   Maps Python objects to database rows; Alembic reads this for migrations.
Who:   Used by ScoreService for inserts and the top-10 query.

Table Design:
    - id: Integer autoincrement primary key, assigned by the store on insert.
      Also serves as the insertion-order tie-break for equal scores.
    - score: Integer, NOT NULL, set once at creation and never updated.

    Index on score DESC:
        The only read is "highest scores first, limit 10"; the index lets the
        database stop after ten entries instead of sorting the whole table.
"""

from sqlalchemy import Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from leaderboard.database import Base


class Score(Base):
    """
    A single submitted game score.

    Lifecycle:
        Created exactly once by ScoreService.submit(); never updated or deleted.
    """

    __tablename__ = "scores"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-generated identifier",
    )

    score: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Submitted score value",
    )

    __table_args__ = (
        Index("idx_scores_score", score.desc()),
    )

    def __repr__(self) -> str:
        return f"<Score(id={self.id}, score={self.score})>"

"""Create scores table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `scores` table holding every submitted game score.
How:   Portable column types only; runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (all scores lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the scores table and its descending score index."""
    op.create_table(
        "scores",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Store-generated identifier",
        ),
        sa.Column(
            "score",
            sa.Integer(),
            nullable=False,
            comment="Submitted score value",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Serves ORDER BY score DESC LIMIT 10
    op.create_index(
        "idx_scores_score",
        "scores",
        [sa.text("score DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_scores_score", table_name="scores")
    op.drop_table("scores")

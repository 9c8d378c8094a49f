"""
Leaderboard Backend — Application Package Initializer
=======================================================

What: Marks the `leaderboard` directory as a Python package.
Why:  Enables module imports like `from leaderboard.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a small layered service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Score logic)      │  ← submit / top10
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the session directly; they hand it to ScoreService,
    which owns every read and write against the `scores` table.
"""

__version__ = "1.0.0"

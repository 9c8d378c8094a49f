"""
Leaderboard Backend — Exception Hierarchy
===========================================

What:  Application-specific exceptions raised by the service layer.
Why:   Services translate every store failure into one exception type so the
       global handler in main.py can turn it into a fixed HTTP response.
How:   Each exception carries a caller-facing message and an optional
       context dict that is logged but never returned.

Exception Hierarchy:
    LeaderboardError (base)
    └── ScorePersistenceError  → 500, plain-text fixed message

Only one failure kind is distinguished: "a persistence operation failed".
Malformed input, connectivity loss and constraint violations all map to it.
"""

from typing import Any, Dict, Optional


class LeaderboardError(Exception):
    """
    Base exception for all leaderboard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ScorePersistenceError(LeaderboardError):
    """
    Raised when reading or writing scores fails for any reason.

    HTTP:    500 Internal Server Error, body is `message` as text/plain.

    The message is one of the fixed strings below; details such as the
    original exception type go in `context` for the server log only.
    """

    SAVE_FAILED = "Error saving score"
    FETCH_FAILED = "Error fetching scores"

    def __init__(
        self,
        message: str = SAVE_FAILED,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

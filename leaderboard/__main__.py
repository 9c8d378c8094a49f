"""Run the leaderboard API with uvicorn: `python -m leaderboard`."""

import uvicorn

from leaderboard.config import settings


def main() -> None:
    uvicorn.run(
        "leaderboard.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

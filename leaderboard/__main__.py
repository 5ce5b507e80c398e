"""`python -m leaderboard` : lance le service avec Uvicorn sur settings.HOST:PORT."""
import uvicorn

from leaderboard.config.settings import settings


def main() -> None:
    uvicorn.run("leaderboard.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()

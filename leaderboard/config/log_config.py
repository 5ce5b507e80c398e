"""
Configuration des logs (stdlib `logging`).

Un seul handler console sur l'espace de noms `leaderboard` ; les modules
loggent via `logging.getLogger(__name__)`.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER_NAME = "leaderboard"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Installe le handler (une seule fois) et applique le niveau demandé."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(getattr(h, "_leaderboard_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._leaderboard_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level.upper())
    return root

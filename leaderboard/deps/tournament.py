"""
Fournit le `TournamentService` partagé aux routes (`Depends(get_tournament_service)`).
Le store est construit une fois, à la demande, depuis `settings.STORE_BACKEND`.
Les tests remplacent la dépendance via `app.dependency_overrides`.
"""
from __future__ import annotations

from threading import Lock
from typing import Optional

from leaderboard.config.settings import settings
from leaderboard.services.player_store import build_store
from leaderboard.services.tournament_service import TournamentService

_SERVICE: Optional[TournamentService] = None
_LOCK = Lock()


def get_tournament_service() -> TournamentService:
    global _SERVICE
    with _LOCK:
        if _SERVICE is None:
            _SERVICE = TournamentService(build_store(settings))
        return _SERVICE

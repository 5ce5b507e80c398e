"""
Module routes/health.py
Rôle:
- Endpoint de santé (service OK + backend de stockage), sans authentification.
"""
from fastapi import APIRouter, Depends

from leaderboard.config.settings import settings
from leaderboard.deps.tournament import get_tournament_service
from leaderboard.services.tournament_service import TournamentService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(service: TournamentService = Depends(get_tournament_service)):
    """Renvoie un OK minimal avec le nom de service et le backend de stockage."""
    return {"ok": True, "service": settings.APP_NAME, "store": service.store.backend}

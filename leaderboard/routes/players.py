"""
Module routes/players.py
Rôle:
- API REST du tournoi : inscription, mise à jour de score, classement, remise à zéro.

Sécurité:
- Toutes les routes exigent la Basic auth (`api_auth_required`), posée
  PAR ROUTE pour ne pas bloquer les préflights OPTIONS.

Endpoints:
- POST   /players        → crée un joueur (201, {"id": ...})
- PUT    /players        → met à jour un score (204)
- DELETE /players        → vide le tournoi (204)
- GET    /players        → classement complet (meilleur score en tête)
- GET    /players/{id}   → un joueur avec son rang

Remarques:
- Les erreurs métier remontent telles quelles ; `routes/error_handlers.py`
  choisit le statut HTTP.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from leaderboard.deps.auth import api_auth_required
from leaderboard.deps.tournament import get_tournament_service
from leaderboard.models.player import (
    ErrorResponse,
    PlayerCreateRequest,
    PlayerCreateResponse,
    PlayerUpdateRequest,
    RankedPlayer,
    is_valid_player_id,
)
from leaderboard.services.errors import ValidationError
from leaderboard.services.tournament_service import TournamentService

router = APIRouter(
    prefix="/players",
    tags=["players"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PlayerCreateResponse,
    responses={409: {"model": ErrorResponse}},
    dependencies=[Depends(api_auth_required)],
)
async def create_player(
    payload: PlayerCreateRequest,
    service: TournamentService = Depends(get_tournament_service),
):
    """Inscription d'un joueur (score initial 0) -> retourne son id."""
    player_id = await service.create_player(payload.name)
    return PlayerCreateResponse(id=player_id)


@router.put(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    dependencies=[Depends(api_auth_required)],
)
async def update_player_score(
    payload: PlayerUpdateRequest,
    service: TournamentService = Depends(get_tournament_service),
):
    """Remplace le score du joueur `payload.id`."""
    await service.update_player_score(payload.id, payload.score)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(api_auth_required)],
)
async def clear_tournament(service: TournamentService = Depends(get_tournament_service)):
    """Supprime tous les joueurs (idempotent)."""
    await service.clear_tournament()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=List[RankedPlayer], dependencies=[Depends(api_auth_required)])
async def list_players(service: TournamentService = Depends(get_tournament_service)):
    """Classement des joueurs par score décroissant (liste vide si tournoi vide)."""
    return await service.list_players_by_rank()


@router.get(
    "/{player_id}",
    response_model=RankedPlayer,
    responses={404: {"model": ErrorResponse}},
    dependencies=[Depends(api_auth_required)],
)
async def get_player(player_id: str, service: TournamentService = Depends(get_tournament_service)):
    """Un joueur et son rang courant."""
    if not is_valid_player_id(player_id):
        raise ValidationError(f"Invalid id format: {player_id!r}", player_id=player_id)
    return await service.get_player_by_id(player_id)

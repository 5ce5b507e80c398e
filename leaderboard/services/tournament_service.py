"""
Service: tournament_service.py
Rôle:
- Seul détenteur des règles métier du tournoi : unicité du nom, mise à jour
  du score, calcul du rang, remise à zéro.
- Orchestre le `PlayerStore` (stockage) et le moteur de classement.

Notes:
- Sans état entre deux appels : tout vit dans le store.
- Aucune nouvelle tentative sur une `StoreError` ; elle remonte à l'appelant.
- Le test d'existence puis l'insertion ne sont pas atomiques côté service.
  Les stores fournis verrouillent l'insertion et lèvent `DuplicateNameError`,
  convertie ici en `ConflictError` ; un store sans cette garantie laisse
  passer deux créations concurrentes du même nom.
"""
from __future__ import annotations

from typing import List, Optional

from leaderboard.engine.ranking import rank_all, rank_of
from leaderboard.models.player import MAX_SCORE, RankedPlayer
from .errors import ConflictError, DuplicateNameError, NotFoundError, ValidationError
from .player_store import PlayerStore
from .reporter import LoggingReporter, TournamentReporter


class TournamentService:
    def __init__(self, store: PlayerStore, reporter: Optional[TournamentReporter] = None) -> None:
        self.store = store
        self.reporter = reporter or LoggingReporter()

    async def create_player(self, name: str) -> str:
        """Inscrit un joueur (score 0) et retourne son id. 409 si le nom est pris."""
        if not name:
            raise ValidationError("Player name must not be empty.")
        if await self.store.exists_by_name(name):
            raise ConflictError(f"Player '{name}' already exists.", name=name)
        try:
            player_id = await self.store.insert(name)
        except DuplicateNameError as exc:
            # Course perdue contre une création concurrente du même nom.
            raise ConflictError(f"Player '{name}' already exists.", name=name) from exc
        self.reporter.player_created(player_id, name)
        return player_id

    async def update_player_score(self, player_id: str, score: int) -> None:
        """Remplace le score d'un joueur existant."""
        if score < 0:
            raise ValidationError("Player score must be a positive integer", player_id=player_id, score=score)
        if isinstance(score, bool) or score > MAX_SCORE:
            raise ValidationError(f"Player score must be an integer <= {MAX_SCORE}", player_id=player_id, score=score)
        updated = await self.store.update_score(player_id, score)
        if not updated:
            raise NotFoundError(f"Player with id '{player_id}' not found.", player_id=player_id)
        self.reporter.score_updated(player_id, score)

    async def clear_tournament(self) -> None:
        """Supprime tous les joueurs. Idempotent ; le nombre supprimé part au reporter."""
        deleted = await self.store.delete_all()
        self.reporter.tournament_cleared(deleted)

    async def get_player_by_id(self, player_id: str) -> RankedPlayer:
        player = await self.store.find_by_id(player_id)
        if player is None:
            raise NotFoundError(f"Player with id '{player_id}' not found.", player_id=player_id)

        # Personne au-dessus : rang 1 sans charger tout le tournoi.
        if await self.store.count_with_score_greater_than(player.score) == 0:
            rank = 1
        else:
            rank = rank_of(player.score, await self.store.find_all())

        ranked = RankedPlayer(id=player.id, name=player.name, score=player.score, rank=rank)
        self.reporter.player_found(ranked)
        return ranked

    async def list_players_by_rank(self) -> List[RankedPlayer]:
        """Classement complet, meilleur score en tête ; liste vide si aucun joueur."""
        players = await self.store.find_all()
        ranked = rank_all(players) if players else []
        self.reporter.players_listed(ranked)
        return ranked

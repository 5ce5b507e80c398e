"""
Service: reporter.py
Rôle:
- Canal latéral du service tournoi : chaque opération réussie y signale un
  événement, au lieu d'appeler `logging` en dur.

Intégrations:
- LoggingReporter (défaut) écrit une entrée INFO par événement.
- Les tests injectent leur propre implémentation pour inspecter les appels.
"""
from __future__ import annotations

import logging
from typing import List, Protocol

from leaderboard.models.player import RankedPlayer

logger = logging.getLogger(__name__)


class TournamentReporter(Protocol):
    def player_created(self, player_id: str, name: str) -> None: ...

    def score_updated(self, player_id: str, score: int) -> None: ...

    def tournament_cleared(self, deleted: int) -> None: ...

    def player_found(self, player: RankedPlayer) -> None: ...

    def players_listed(self, players: List[RankedPlayer]) -> None: ...


class LoggingReporter:
    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def player_created(self, player_id: str, name: str) -> None:
        self.log.info("Player created: %s (%s).", player_id, name)

    def score_updated(self, player_id: str, score: int) -> None:
        self.log.info("Player %s updated: score=%d.", player_id, score)

    def tournament_cleared(self, deleted: int) -> None:
        self.log.info("%d Players deleted.", deleted)

    def player_found(self, player: RankedPlayer) -> None:
        self.log.info("Player %s found.", player.model_dump())

    def players_listed(self, players: List[RankedPlayer]) -> None:
        if not players:
            self.log.info("No player found.")
            return
        self.log.info("Players sorted by rank : %s", [p.model_dump() for p in players])

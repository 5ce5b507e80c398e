import base64
from typing import List

import pytest

from leaderboard.config.settings import settings
from leaderboard.models.player import RankedPlayer
from leaderboard.services.player_store import MemoryPlayerStore
from leaderboard.services.tournament_service import TournamentService


class RecordingReporter:
    """Garde la trace des événements émis par le service."""

    def __init__(self) -> None:
        self.events: List[tuple] = []

    def player_created(self, player_id: str, name: str) -> None:
        self.events.append(("player_created", player_id, name))

    def score_updated(self, player_id: str, score: int) -> None:
        self.events.append(("score_updated", player_id, score))

    def tournament_cleared(self, deleted: int) -> None:
        self.events.append(("tournament_cleared", deleted))

    def player_found(self, player: RankedPlayer) -> None:
        self.events.append(("player_found", player))

    def players_listed(self, players: List[RankedPlayer]) -> None:
        self.events.append(("players_listed", players))

    def names(self) -> List[str]:
        return [event[0] for event in self.events]


@pytest.fixture
def store():
    return MemoryPlayerStore()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def service(store, reporter):
    return TournamentService(store, reporter=reporter)


def basic_auth(login: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{login}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def auth_headers():
    return basic_auth(settings.API_LOGIN, settings.API_PASSWORD)

"""
Ranking engine.
Pure functions turning a set of players into a leaderboard. No I/O.

Rank of a player = 1 + number of distinct scores strictly greater than its
own score: players sharing a score share a rank and the next lower score gets
the following rank ({150, 80, 10, 10, 5, 0} -> {1, 2, 3, 3, 4, 5}).
Ties keep their input order (sorted() is stable, including with reverse=True).
"""
from __future__ import annotations

from typing import Iterable, List

from leaderboard.models.player import Player, RankedPlayer


def rank_all(players: Iterable[Player]) -> List[RankedPlayer]:
    """Return players sorted by descending score with their rank."""
    records = list(players)
    seen = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"Duplicate player id in ranking input: {record.id}")
        seen.add(record.id)

    ordered = sorted(records, key=lambda p: p.score, reverse=True)

    ranked: List[RankedPlayer] = []
    current_rank = 0
    previous_score = None
    for player in ordered:
        if previous_score is None or player.score < previous_score:
            current_rank += 1
        previous_score = player.score
        ranked.append(
            RankedPlayer(id=player.id, name=player.name, score=player.score, rank=current_rank)
        )
    return ranked


def rank_of(score: int, players: Iterable[Player]) -> int:
    """Rank a single score against the whole player set without building the leaderboard."""
    higher_scores = {p.score for p in players if p.score > score}
    return len(higher_scores) + 1

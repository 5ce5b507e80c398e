import random

import pytest

from leaderboard.engine.ranking import rank_all, rank_of
from leaderboard.models.player import Player


def _players(*scores):
    return [Player(id=f"{i:032x}", name=f"p{i}", score=s) for i, s in enumerate(scores)]


def test_rank_all_shares_rank_on_ties_then_continues():
    ranked = rank_all(_players(10, 150, 0, 80, 5, 10))

    assert [p.score for p in ranked] == [150, 80, 10, 10, 5, 0]
    assert [p.rank for p in ranked] == [1, 2, 3, 3, 4, 5]


def test_rank_all_empty_input():
    assert rank_all([]) == []


def test_rank_all_keeps_input_order_among_ties():
    players = _players(10, 20, 10, 10)
    ranked = rank_all(players)

    tied = [p.id for p in ranked if p.score == 10]
    assert tied == [players[0].id, players[2].id, players[3].id]


def test_rank_all_everyone_tied():
    ranked = rank_all(_players(0, 0, 0))
    assert [p.rank for p in ranked] == [1, 1, 1]


def test_rank_all_rejects_duplicate_ids():
    player = Player(id="a" * 32, name="freddy", score=3)
    with pytest.raises(ValueError):
        rank_all([player, player])


def test_rank_of_counts_distinct_higher_scores():
    players = _players(150, 80, 10, 10, 5, 0)

    assert rank_of(150, players) == 1
    assert rank_of(10, players) == 3
    assert rank_of(5, players) == 4
    assert rank_of(0, players) == 5
    # un score absent du tournoi est classé comme s'il y entrait
    assert rank_of(1000, players) == 1
    assert rank_of(7, players) == 4


@pytest.mark.parametrize("seed", range(5))
def test_rank_of_agrees_with_rank_all(seed):
    rng = random.Random(seed)
    players = _players(*(rng.randint(0, 20) for _ in range(rng.randint(1, 40))))

    for ranked in rank_all(players):
        assert rank_of(ranked.score, players) == ranked.rank

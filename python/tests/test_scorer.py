"""Scoring and best-score tests."""

from __future__ import annotations

import pytest

from backend.config import EngineConfig
from backend.engine.scoring import Scorer
from backend.models.highscore import HighScoreManager, ScoreEntry


@pytest.mark.parametrize(
    "moves, disks, expected",
    [
        (0, 3, 0),
        (7, 3, 1000),
        (14, 3, 500),
        (9, 3, 778),
        (1, 1, 1000),
        (1023, 10, 1000),
        (10_000, 3, 10),
    ],
    ids=["no-moves", "optimal", "double", "rounded", "one-disk", "ten-disks", "floor"],
)
def test_score(moves: int, disks: int, expected: int) -> None:
    assert Scorer.score(moves, disks) == expected


def test_score_rounds_half_up() -> None:
    # 1000 * 1 / 16 = 62.5
    assert Scorer.score(16, 1) == 63


def test_score_floor_is_configurable() -> None:
    assert Scorer.score(10_000, 3, EngineConfig(score_floor=50)) == 50


def test_optimal() -> None:
    assert [Scorer.optimal(n) for n in range(5)] == [0, 1, 3, 7, 15]


# -- best score ---------------------------------------------------------------


def _entry(score: int, disks: int = 3) -> ScoreEntry:
    return ScoreEntry(disks=disks, moves=7, score=score, date="2026-01-01 12:00")


def test_best_score_is_a_running_maximum() -> None:
    manager = HighScoreManager()
    assert manager.add_score(_entry(500))
    assert not manager.add_score(_entry(400))
    assert not manager.add_score(_entry(500))
    assert manager.add_score(_entry(1000, disks=4))
    assert manager.best == 1000


def test_scores_sorted_best_first() -> None:
    manager = HighScoreManager()
    for score in (300, 900, 600):
        manager.add_score(_entry(score))
    assert [e.score for e in manager.get_scores(3)] == [900, 600, 300]
    assert manager.get_all_sizes() == [3]


def test_new_session_forgets_everything() -> None:
    manager = HighScoreManager()
    manager.add_score(_entry(800))
    manager.new_session()
    assert manager.best == 0
    assert manager.get_all_sizes() == []

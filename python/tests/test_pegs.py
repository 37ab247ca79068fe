"""Peg parsing and event model tests."""

from __future__ import annotations

import pytest

from backend.models.events import Outcome, Phase, Result, Snapshot
from backend.models.pegs import Move, Peg


@pytest.mark.parametrize(
    "value, expected",
    [("A", Peg.A), ("b", Peg.B), (" c ", Peg.C), (0, Peg.A), (2, Peg.C), (Peg.B, Peg.B)],
    ids=lambda v: repr(v),
)
def test_parse(value: object, expected: Peg) -> None:
    assert Peg.parse(value) is expected  # type: ignore[arg-type]


@pytest.mark.parametrize("value", ["D", "", 3, -1, True, None, 1.0], ids=lambda v: repr(v))
def test_parse_rejects_unknown_pegs(value: object) -> None:
    with pytest.raises(ValueError):
        Peg.parse(value)  # type: ignore[arg-type]


def test_index_round_trips() -> None:
    assert [Peg.parse(p.index) for p in Peg] == list(Peg)


def test_move_str() -> None:
    assert str(Move.of(0, "c")) == "A→C"


def test_snapshot_is_read_only() -> None:
    snap = Snapshot(
        pegs=((1,), (), ()), move_count=0, disk_count=1, optimal=1, phase=Phase.IDLE
    )
    with pytest.raises(AttributeError):
        snap.move_count = 3  # type: ignore[misc]
    assert snap.peg(Peg.A) == (1,)
    assert Result(Outcome.ACCEPTED, snap).ok
    assert not Result(Outcome.CANCELLED, snap).ok

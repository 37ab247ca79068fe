"""Move legality tests."""

from __future__ import annotations

import pytest

from backend.engine.gamerules import (
    IllegalMoveError,
    assert_legal,
    check_move,
    is_legal,
    legal_moves,
)
from backend.engine.gamestate import PuzzleState
from backend.models.events import Rejection
from backend.models.pegs import Move, Peg


# -- helpers ------------------------------------------------------------------


def _state(pegs: list[list[int]]) -> PuzzleState:
    state = PuzzleState(sum(len(p) for p in pegs))
    state.pegs = [list(p) for p in pegs]
    return state


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("peg", list(Peg), ids=lambda p: p.value)
def test_same_peg_is_never_legal(peg: Peg) -> None:
    state = _state([[3], [2], [1]])
    assert not is_legal(state, peg, peg)
    assert check_move(state, peg, peg) is Rejection.SAME_PEG


def test_empty_source_is_illegal() -> None:
    state = PuzzleState(3)
    assert check_move(state, Peg.B, Peg.C) is Rejection.EMPTY_PEG


def test_larger_on_smaller_is_illegal() -> None:
    state = _state([[3, 2], [], [1]])
    assert check_move(state, Peg.A, Peg.C) is Rejection.INVALID_MOVE


@pytest.mark.parametrize(
    "pegs, source, target",
    [
        ([[3, 2, 1], [], []], Peg.A, Peg.C),
        ([[3, 2], [1], []], Peg.A, Peg.C),
        ([[3], [1], [2]], Peg.B, Peg.C),
    ],
    ids=["onto-empty", "onto-empty-with-others", "smaller-onto-larger"],
)
def test_legal_moves(pegs: list[list[int]], source: Peg, target: Peg) -> None:
    assert is_legal(_state(pegs), source, target)


def test_checks_have_no_side_effects() -> None:
    state = PuzzleState(3)
    for _ in range(3):
        is_legal(state, Peg.A, Peg.B)
        check_move(state, Peg.B, Peg.A)
    assert state.pegs == [[3, 2, 1], [], []]
    assert state.moves == 0


def test_legal_moves_from_start() -> None:
    assert legal_moves(PuzzleState(3)) == [Move.of("A", "B"), Move.of("A", "C")]


def test_assert_legal_raises() -> None:
    state = _state([[3, 2], [], [1]])
    with pytest.raises(IllegalMoveError) as info:
        assert_legal(state, Move.of("A", "C"))
    assert info.value.reason is Rejection.INVALID_MOVE

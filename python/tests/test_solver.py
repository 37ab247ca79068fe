"""Solver test suite — plan length, legality and hints.

Every plan is replayed through the real ``PuzzleState`` and rules, so a plan
that looks right but breaks the stacking rule fails here.
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gamerules import check_move, legal_moves
from backend.engine.gamesolver.solver import Solver
from backend.engine.gamestate import PuzzleState
from backend.models.pegs import Move, Peg


# -- helpers ------------------------------------------------------------------


def _replay(state: PuzzleState, moves: list[Move]) -> None:
    for i, move in enumerate(moves):
        reason = check_move(state, move.source, move.target)
        assert reason is None, (
            f"Move {i} ({move}) rejected as {reason} at pegs {state.pegs}"
        )
        state.apply(move)


def _random_position(disk_count: int, seed: int) -> PuzzleState:
    """Reach a position by a seeded walk of legal moves."""
    rng = random.Random(seed)
    state = PuzzleState(disk_count)
    for _ in range(rng.randint(0, 60)):
        state.apply(rng.choice(legal_moves(state)))
    return state


# -- plan ---------------------------------------------------------------------


def test_plan_of_zero_disks_is_empty() -> None:
    assert Solver.plan(0) == []


@pytest.mark.parametrize("n", range(0, 11), ids=lambda n: f"{n}-disks")
def test_plan_length_is_optimal(n: int) -> None:
    assert len(Solver.plan(n)) == 2**n - 1


def test_plan_for_three_disks() -> None:
    expected = [
        Move.of("A", "C"),
        Move.of("A", "B"),
        Move.of("C", "B"),
        Move.of("A", "C"),
        Move.of("B", "A"),
        Move.of("B", "C"),
        Move.of("A", "C"),
    ]
    assert Solver.plan(3) == expected


@pytest.mark.parametrize("n", range(1, 11), ids=lambda n: f"{n}-disks")
def test_plan_replays_legally_to_peg_c(n: int) -> None:
    state = PuzzleState(n)
    _replay(state, Solver.plan(n))

    assert state.pegs[Peg.C.index] == list(range(n, 0, -1))
    assert state.pegs[Peg.A.index] == []
    assert state.pegs[Peg.B.index] == []
    assert state.moves == 2**n - 1
    assert state.is_solved(Peg.C)


def test_plan_towards_another_peg() -> None:
    state = PuzzleState(4)
    _replay(state, Solver.plan(4, Peg.A, Peg.B, Peg.C))
    assert state.is_solved(Peg.B)


def test_plan_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        Solver.plan(-1)


def test_plan_is_a_fresh_list_each_call() -> None:
    first = Solver.plan(3)
    first.clear()
    assert len(Solver.plan(3)) == 7


# -- hint ---------------------------------------------------------------------


@pytest.mark.parametrize("n", range(1, 8), ids=lambda n: f"{n}-disks")
def test_hint_from_start_is_first_plan_move(n: int) -> None:
    assert Solver.hint(PuzzleState(n).pegs) == Solver.plan(n)[0]


def test_hint_when_solved_is_none() -> None:
    assert Solver.hint([[], [], [3, 2, 1]]) is None
    assert Solver.distance([[], [], [3, 2, 1]]) == 0


def test_hint_does_not_touch_pegs() -> None:
    pegs = [[3], [2, 1], []]
    Solver.hint(pegs)
    assert pegs == [[3], [2, 1], []]


@pytest.mark.parametrize("seed", range(20), ids=lambda s: f"seed-{s}")
def test_following_hints_solves_in_distance_moves(seed: int) -> None:
    state = _random_position(5, seed)
    remaining = Solver.distance(state.pegs)

    for _ in range(remaining):
        move = Solver.hint(state.pegs)
        assert move is not None
        _replay(state, [move])

    assert state.is_solved(Peg.C), f"Not solved after {remaining} hints (seed {seed})"
    assert Solver.hint(state.pegs) is None


def test_distance_from_start_is_optimal() -> None:
    for n in range(1, 11):
        assert Solver.distance(PuzzleState(n).pegs) == 2**n - 1

"""PuzzleState and generator tests — reset, clamping and the stack invariants."""

from __future__ import annotations

import random

import pytest

from backend.config import EngineConfig
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamerules import legal_moves
from backend.engine.gamestate import PuzzleState
from backend.models.pegs import Move, Peg


# -- helpers ------------------------------------------------------------------


def _assert_invariants(state: PuzzleState) -> None:
    for peg, stack in zip(Peg, state.pegs):
        assert all(a > b for a, b in zip(stack, stack[1:])), (
            f"Peg {peg} not strictly decreasing: {stack}"
        )
    disks = sorted(d for stack in state.pegs for d in stack)
    assert disks == list(range(1, state.disk_count + 1)), f"Disks lost or duplicated: {state.pegs}"


# -- reset --------------------------------------------------------------------


@pytest.mark.parametrize("n", [1, 3, 10], ids=lambda n: f"{n}-disks")
def test_reset_builds_starting_tower(n: int) -> None:
    state = PuzzleState(n)
    assert state.pegs == [list(range(n, 0, -1)), [], []]
    assert state.moves == 0
    assert state.disk_count == n


@pytest.mark.parametrize(
    "requested, expected",
    [(0, 1), (-5, 1), (1, 1), (10, 10), (11, 10), (99, 10)],
    ids=lambda v: str(v),
)
def test_reset_clamps_disk_count(requested: int, expected: int) -> None:
    state = PuzzleState()
    assert state.reset(requested) == expected
    assert state.disk_count == expected
    assert len(state.pegs[0]) == expected


def test_reset_is_idempotent() -> None:
    state = PuzzleState(4)
    state.apply(Move.of("A", "B"))
    state.reset(4)
    first = (state.copy_pegs(), state.moves, state.disk_count)
    state.reset(4)
    assert (state.copy_pegs(), state.moves, state.disk_count) == first


def test_default_disk_count_comes_from_config() -> None:
    assert PuzzleState(config=EngineConfig(default_disks=5)).disk_count == 5


def test_clamp_rejects_non_integers() -> None:
    with pytest.raises(TypeError):
        GameGenerator.clamp("3")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        GameGenerator.clamp(True)


# -- queries and moves --------------------------------------------------------


def test_top_of() -> None:
    state = PuzzleState(3)
    assert state.top_of(Peg.A) == 1
    assert state.top_of(Peg.B) is None


def test_apply_moves_top_disk_and_counts() -> None:
    state = PuzzleState(3)
    disk = state.apply(Move.of("A", "C"))
    assert disk == 1
    assert state.pegs == [[3, 2], [], [1]]
    assert state.moves == 1


def test_is_solved_per_target() -> None:
    state = PuzzleState(1)
    assert not state.is_solved(Peg.C)
    state.apply(Move.of("A", "B"))
    assert state.is_solved(Peg.B)
    assert not state.is_solved(Peg.C)


@pytest.mark.parametrize("seed", range(10), ids=lambda s: f"seed-{s}")
def test_invariants_hold_along_legal_walks(seed: int) -> None:
    rng = random.Random(seed)
    state = PuzzleState(rng.randint(1, 10))
    _assert_invariants(state)
    for _ in range(200):
        state.apply(rng.choice(legal_moves(state)))
        _assert_invariants(state)

"""Move legality — pure checks over a ``PuzzleState``."""

from __future__ import annotations

from backend.engine.gamestate import PuzzleState
from backend.models.events import Rejection
from backend.models.pegs import Move, Peg


class IllegalMoveError(RuntimeError):
    """A move that was expected to be legal is not."""

    def __init__(self, move: Move, reason: Rejection) -> None:
        super().__init__(f"Illegal move {move}: {reason.value}")
        self.move = move
        self.reason = reason


def check_move(state: PuzzleState, source: Peg, target: Peg) -> Rejection | None:
    """Return why moving ``source``'s top disk to ``target`` is illegal, or None."""
    if source == target:
        return Rejection.SAME_PEG
    moving = state.top_of(source)
    if moving is None:
        return Rejection.EMPTY_PEG
    resting = state.top_of(target)
    if resting is not None and resting < moving:
        return Rejection.INVALID_MOVE
    return None


def is_legal(state: PuzzleState, source: Peg, target: Peg) -> bool:
    return check_move(state, source, target) is None


def legal_moves(state: PuzzleState) -> list[Move]:
    return [
        Move(source, target)
        for source in Peg
        for target in Peg
        if is_legal(state, source, target)
    ]


def assert_legal(state: PuzzleState, move: Move) -> None:
    reason = check_move(state, move.source, move.target)
    if reason is not None:
        raise IllegalMoveError(move, reason)

"""Phases, results and events exchanged between the scheduler and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Union

from backend.models.pegs import Move, Peg


class Phase(StrEnum):
    IDLE = "idle"
    AWAITING_DESTINATION = "awaiting_destination"
    ANIMATING = "animating"
    AUTO_PLAYING = "auto_playing"
    SOLVED = "solved"


class Outcome(StrEnum):
    ACCEPTED = "accepted"
    APPLIED = "applied"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


class Rejection(StrEnum):
    EMPTY_PEG = "empty_peg"
    INVALID_MOVE = "invalid_move"
    SAME_PEG = "same_peg"
    AUTO_PLAY_ACTIVE = "auto_play_active"
    MOVE_IN_PROGRESS = "move_in_progress"
    NO_SELECTION = "no_selection"
    PUZZLE_SOLVED = "puzzle_solved"


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of the puzzle, pegs listed bottom to top."""

    pegs: tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...]]
    move_count: int
    disk_count: int
    optimal: int
    phase: Phase
    selected: Peg | None = None

    def peg(self, peg: Peg) -> tuple[int, ...]:
        return self.pegs[peg.index]


@dataclass(frozen=True)
class Result:
    outcome: Outcome
    snapshot: Snapshot
    reason: Rejection | None = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.ACCEPTED, Outcome.APPLIED)


# -- events -------------------------------------------------------------------


@dataclass(frozen=True)
class MoveApplied:
    move: Move
    disk: int
    move_count: int
    auto: bool = False


@dataclass(frozen=True)
class InvalidMoveAttempted:
    move: Move
    reason: Rejection


@dataclass(frozen=True)
class Solved:
    move_count: int
    optimal: int
    score: int
    is_new_best: bool
    auto: bool = False


@dataclass(frozen=True)
class AutoSolveCancelled:
    moves_completed: int


GameEvent = Union[MoveApplied, InvalidMoveAttempted, Solved, AutoSolveCancelled]
Listener = Callable[[GameEvent], None]

from backend.models.events import (
    AutoSolveCancelled,
    GameEvent,
    InvalidMoveAttempted,
    Listener,
    MoveApplied,
    Outcome,
    Phase,
    Rejection,
    Result,
    Snapshot,
    Solved,
)
from backend.models.highscore import HighScoreManager, ScoreEntry
from backend.models.pegs import Move, Peg

__all__ = [
    "AutoSolveCancelled",
    "GameEvent",
    "HighScoreManager",
    "InvalidMoveAttempted",
    "Listener",
    "Move",
    "MoveApplied",
    "Outcome",
    "Peg",
    "Phase",
    "Rejection",
    "Result",
    "ScoreEntry",
    "Snapshot",
    "Solved",
]

"""Tracks the canonical peg contents and move counter of a game."""

from __future__ import annotations

from backend.config import DEFAULT_CONFIG, EngineConfig
from backend.engine.gamegenerator import GameGenerator
from backend.models.pegs import Move, Peg


class PuzzleState:
    """Three stacks of disk sizes, bottom to top, plus the move counter.

    ``apply`` does not check legality; only the scheduler calls it, and only
    after the rules have approved the move.
    """

    def __init__(
        self,
        disk_count: int | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self.pegs: list[list[int]] = [[], [], []]
        self.disk_count: int = 0
        self.moves: int = 0
        self.reset(config.default_disks if disk_count is None else disk_count)

    # -- lifecycle ------------------------------------------------------------

    def reset(self, disk_count: int) -> int:
        """Rebuild the starting tower; returns the clamped disk count."""
        self.disk_count = GameGenerator.clamp(disk_count, self.config)
        self.pegs = GameGenerator.initial(self.disk_count)
        self.moves = 0
        return self.disk_count

    # -- queries --------------------------------------------------------------

    def top_of(self, peg: Peg) -> int | None:
        stack = self.pegs[peg.index]
        return stack[-1] if stack else None

    def is_solved(self, target: Peg = Peg.C) -> bool:
        return len(self.pegs[target.index]) == self.disk_count

    def copy_pegs(self) -> tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...]]:
        a, b, c = (tuple(stack) for stack in self.pegs)
        return a, b, c

    # -- moves ----------------------------------------------------------------

    def apply(self, move: Move) -> int:
        """Move the top disk of ``move.source`` onto ``move.target``.

        Returns the size of the disk that moved.
        """
        disk = self.pegs[move.source.index].pop()
        self.pegs[move.target.index].append(disk)
        self.moves += 1
        return disk

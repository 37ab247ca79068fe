"""Score a finished (or in-progress) game against the optimal move count."""

from __future__ import annotations

from backend.config import DEFAULT_CONFIG, EngineConfig


class Scorer:
    """Stateless — all methods are static."""

    @staticmethod
    def optimal(disk_count: int) -> int:
        return 2**disk_count - 1

    @staticmethod
    def score(
        move_count: int,
        disk_count: int,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> int:
        """``scale * optimal / move_count`` rounded half up, never below the floor.

        Returns 0 before the first move.
        """
        if move_count <= 0:
            return 0
        optimal = Scorer.optimal(disk_count)
        scaled = config.score_scale * optimal
        rounded = (2 * scaled + move_count) // (2 * move_count)
        return max(config.score_floor, rounded)

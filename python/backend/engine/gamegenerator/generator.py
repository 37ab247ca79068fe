"""Builds the canonical starting tower."""

from __future__ import annotations

from backend.config import DEFAULT_CONFIG, EngineConfig


class GameGenerator:
    """Stateless — all methods are static."""

    @staticmethod
    def clamp(disk_count: int, config: EngineConfig = DEFAULT_CONFIG) -> int:
        """Pull *disk_count* into ``[min_disks, max_disks]``."""
        if isinstance(disk_count, bool) or not isinstance(disk_count, int):
            raise TypeError(f"disk_count must be an int, got {disk_count!r}")
        return max(config.min_disks, min(config.max_disks, disk_count))

    @staticmethod
    def initial(disk_count: int) -> list[list[int]]:
        """Return the starting pegs: every disk on A, largest at the bottom.

        Example::

            GameGenerator.initial(3)  # [[3, 2, 1], [], []]
        """
        return [list(range(disk_count, 0, -1)), [], []]

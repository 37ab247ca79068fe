"""Best-score tracking for the current session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoreEntry:
    disks: int
    moves: int
    score: int
    date: str


class HighScoreManager:
    """Keeps completed games and the running best score in memory.

    Resetting the puzzle leaves both untouched; only ``new_session`` clears
    them.
    """

    def __init__(self) -> None:
        self._scores: dict[str, list[ScoreEntry]] = {}
        self.best: int = 0

    # -- session --------------------------------------------------------------

    def new_session(self) -> None:
        self._scores.clear()
        self.best = 0

    # -- queries --------------------------------------------------------------

    def add_score(self, entry: ScoreEntry) -> bool:
        """Record *entry*; return True if it beats the stored best."""
        key = str(entry.disks)
        if key not in self._scores:
            self._scores[key] = []
        self._scores[key].append(entry)
        self._scores[key].sort(key=lambda e: (-e.score, e.moves))
        if entry.score > self.best:
            self.best = entry.score
            return True
        return False

    def get_scores(self, disks: int) -> list[ScoreEntry]:
        return self._scores.get(str(disks), [])

    def get_all_sizes(self) -> list[int]:
        return sorted(int(k) for k in self._scores)

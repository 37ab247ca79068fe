"""Animation collaborators the scheduler awaits after each applied move."""

from __future__ import annotations

import asyncio
from typing import Protocol

from backend.models.pegs import Peg


class Animator(Protocol):
    async def animate_transfer(self, disk: int, source: Peg, target: Peg) -> None:
        """Return once the disk has visibly settled on *target*."""
        ...


class InstantAnimator:
    """Settles immediately; used headless and in tests."""

    async def animate_transfer(self, disk: int, source: Peg, target: Peg) -> None:
        await asyncio.sleep(0)


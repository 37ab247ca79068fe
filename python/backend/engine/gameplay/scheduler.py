"""Move scheduler — the single authority that mutates the puzzle.

Manual selections and automatic solver runs both go through here.  A move is
validated, applied to the ``PuzzleState`` immediately, and then the animation
collaborator is awaited; the next move (from either source) is not applied
until that animation has settled, so at most one transfer is in flight.

Everything runs on one asyncio event loop.  The ``animate_transfer`` await is
the only suspension point, apart from the optional pause between automatic
steps.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from datetime import datetime

from backend.config import DEFAULT_CONFIG, EngineConfig
from backend.engine.gameplay.animation import Animator, InstantAnimator
from backend.engine.gamerules import assert_legal, check_move
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import PuzzleState
from backend.engine.scoring import Scorer
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

logger = logging.getLogger(__name__)


class MoveScheduler:
    """Owns a ``PuzzleState`` and serialises every move applied to it."""

    def __init__(
        self,
        disk_count: int | None = None,
        *,
        animator: Animator | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
        scores: HighScoreManager | None = None,
    ) -> None:
        self.config = config
        self.state = PuzzleState(disk_count, config)
        self.animator: Animator = animator or InstantAnimator()
        self.scores = scores if scores is not None else HighScoreManager()
        self.phase = Phase.IDLE

        self._selected: Peg | None = None
        self._listeners: list[Listener] = []
        self._flight = asyncio.Lock()
        # Bumped by every reset; a run or move started under an older epoch
        # must not touch the phase once it resumes.
        self._epoch = 0
        self._cancel_requested = False

    # -- listeners ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # -- lifecycle ------------------------------------------------------------

    def reset(self, disk_count: int | None = None) -> Snapshot:
        """Rebuild the starting tower and return to ``Phase.IDLE``.

        Allowed from any phase.  A running automatic solve stops at its next
        step boundary; an animation already in flight is left to finish.
        """
        if disk_count is None:
            disk_count = self.state.disk_count
        if self.phase is Phase.AUTO_PLAYING:
            logger.info("Reset interrupts automatic solve")
        self._epoch += 1
        self._cancel_requested = False
        self._selected = None
        self.state.reset(disk_count)
        self.phase = Phase.IDLE
        logger.debug("Reset to %d disks", self.state.disk_count)
        return self.snapshot()

    def new_session(self, disk_count: int | None = None) -> Snapshot:
        """Forget the best score and score history, then reset."""
        self.scores.new_session()
        return self.reset(disk_count)

    # -- queries --------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        return Snapshot(
            pegs=self.state.copy_pegs(),
            move_count=self.state.moves,
            disk_count=self.state.disk_count,
            optimal=Scorer.optimal(self.state.disk_count),
            phase=self.phase,
            selected=self._selected,
        )

    @property
    def selected(self) -> Peg | None:
        return self._selected

    @property
    def score_preview(self) -> int:
        return Scorer.score(self.state.moves, self.state.disk_count, self.config)

    @property
    def best_score(self) -> int:
        return self.scores.best

    def targets(self) -> tuple[Peg, ...]:
        return (Peg.B, Peg.C) if self.config.accept_any_target else (Peg.C,)

    def is_won(self) -> bool:
        return any(self.state.is_solved(peg) for peg in self.targets())

    def hint(self) -> Move | None:
        """Next move of a shortest solution towards the nearest target peg."""
        pegs = self.state.copy_pegs()
        target = min(self.targets(), key=lambda peg: Solver.distance(pegs, peg))
        return Solver.hint(pegs, target)

    # -- manual play ----------------------------------------------------------

    def _manual_gate(self) -> Rejection | None:
        if self.phase is Phase.AUTO_PLAYING:
            return Rejection.AUTO_PLAY_ACTIVE
        if self.phase is Phase.ANIMATING:
            return Rejection.MOVE_IN_PROGRESS
        if self.phase is Phase.SOLVED:
            return Rejection.PUZZLE_SOLVED
        return None

    def _reject(self, reason: Rejection) -> Result:
        logger.debug("Rejected: %s", reason.value)
        return Result(Outcome.REJECTED, self.snapshot(), reason)

    def select_source(self, peg: Peg | str | int) -> Result:
        source = Peg.parse(peg)
        reason = self._manual_gate()
        if reason is not None:
            return self._reject(reason)
        if self.state.top_of(source) is None:
            self._selected = None
            self.phase = Phase.IDLE
            return self._reject(Rejection.EMPTY_PEG)
        self._selected = source
        self.phase = Phase.AWAITING_DESTINATION
        return Result(Outcome.ACCEPTED, self.snapshot())

    async def select_destination(self, peg: Peg | str | int) -> Result:
        """Move the selected disk onto *peg* and wait for it to settle.

        Choosing the selected peg again cancels the selection.  An illegal
        destination clears the selection and emits ``InvalidMoveAttempted``.
        """
        target = Peg.parse(peg)
        reason = self._manual_gate()
        if reason is not None:
            return self._reject(reason)
        if self.phase is not Phase.AWAITING_DESTINATION or self._selected is None:
            return self._reject(Rejection.NO_SELECTION)

        source, self._selected = self._selected, None
        self.phase = Phase.IDLE
        if source == target:
            return Result(Outcome.CANCELLED, self.snapshot())

        move = Move(source, target)
        reason = check_move(self.state, source, target)
        if reason is not None:
            self._emit(InvalidMoveAttempted(move, reason))
            return self._reject(reason)

        epoch = self._epoch
        self.phase = Phase.ANIMATING
        try:
            async with self._flight:
                if epoch != self._epoch:
                    return Result(Outcome.CANCELLED, self.snapshot())
                await self._transfer(move, auto=False)
        finally:
            # A raising listener must not leave the puzzle stuck mid-move.
            if epoch == self._epoch and self.phase is Phase.ANIMATING:
                self.phase = Phase.IDLE

        if epoch != self._epoch:
            return Result(Outcome.APPLIED, self.snapshot())
        if self.is_won():
            self.phase = Phase.SOLVED
            self._record_win()
        else:
            self.phase = Phase.IDLE
        return Result(Outcome.APPLIED, self.snapshot())

    async def select(self, peg: Peg | str | int) -> Result:
        """Peg click: pick a source, or a destination once a source is held."""
        if self.phase is Phase.AWAITING_DESTINATION:
            return await self.select_destination(peg)
        return self.select_source(peg)

    async def request_move(
        self, source: Peg | str | int, target: Peg | str | int
    ) -> Result:
        result = self.select_source(source)
        if not result.ok:
            return result
        return await self.select_destination(target)

    def _record_win(self) -> None:
        moves = self.state.moves
        disks = self.state.disk_count
        score = Scorer.score(moves, disks, self.config)
        is_new_best = self.scores.add_score(
            ScoreEntry(
                disks=disks,
                moves=moves,
                score=score,
                date=datetime.now().strftime("%Y-%m-%d %H:%M"),
            )
        )
        logger.info("Solved %d disks in %d moves, score %d", disks, moves, score)
        self._emit(Solved(moves, Scorer.optimal(disks), score, is_new_best))

    # -- automatic play -------------------------------------------------------

    async def start_auto_solve(
        self, disk_count: int | None = None
    ) -> AsyncIterator[GameEvent]:
        """Reset and replay the optimal plan, yielding each ``MoveApplied``.

        The stream ends with ``Solved`` when the plan is exhausted, or with
        ``AutoSolveCancelled`` after ``cancel_auto_solve`` or a reset.  Nothing
        happens until the first item is requested.
        """
        self.reset(disk_count)
        epoch = self._epoch
        plan = Solver.plan(self.state.disk_count)
        self.phase = Phase.AUTO_PLAYING
        logger.info(
            "Automatic solve of %d disks (%d moves)", self.state.disk_count, len(plan)
        )

        applied = 0
        try:
            for move in plan:
                if self._interrupted(epoch):
                    break
                async with self._flight:
                    if self._interrupted(epoch):
                        break
                    assert_legal(self.state, move)
                    event = await self._transfer(move, auto=True)
                applied += 1
                yield event
                if self.config.step_delay > 0 and applied < len(plan):
                    await asyncio.sleep(self.config.step_delay)

            final: GameEvent
            if applied == len(plan) and epoch == self._epoch:
                self.phase = Phase.SOLVED
                disks = self.state.disk_count
                final = Solved(
                    move_count=self.state.moves,
                    optimal=Scorer.optimal(disks),
                    score=Scorer.score(self.state.moves, disks, self.config),
                    is_new_best=False,
                    auto=True,
                )
                logger.info("Automatic solve finished in %d moves", self.state.moves)
            else:
                if epoch == self._epoch:
                    self.phase = Phase.IDLE
                    self._cancel_requested = False
                final = AutoSolveCancelled(applied)
                logger.info("Automatic solve cancelled after %d moves", applied)
            self._emit(final)
            yield final
        finally:
            if epoch == self._epoch and self.phase is Phase.AUTO_PLAYING:
                self.phase = Phase.IDLE
                self._cancel_requested = False

    async def run_auto_solve(self, disk_count: int | None = None) -> GameEvent:
        """Drain ``start_auto_solve`` and return its final event."""
        final: GameEvent | None = None
        async for event in self.start_auto_solve(disk_count):
            final = event
        if final is None:
            raise RuntimeError("automatic solve ended without a final event")
        return final

    def cancel_auto_solve(self) -> None:
        """Stop the automatic run after the move currently animating."""
        if self.phase is Phase.AUTO_PLAYING:
            self._cancel_requested = True
            logger.debug("Cancellation requested")

    def _interrupted(self, epoch: int) -> bool:
        return self._cancel_requested or epoch != self._epoch

    # -- transfer -------------------------------------------------------------

    async def _transfer(self, move: Move, *, auto: bool) -> MoveApplied:
        # Caller holds self._flight.
        disk = self.state.apply(move)
        event = MoveApplied(move, disk, self.state.moves, auto)
        logger.debug("Move %d: disk %d %s", self.state.moves, disk, move)
        self._emit(event)
        try:
            await self.animator.animate_transfer(disk, move.source, move.target)
        except Exception:
            logger.exception("Animation of disk %d %s failed", disk, move)
        return event

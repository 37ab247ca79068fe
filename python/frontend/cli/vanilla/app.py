"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for disk count, play, demo, and scores.
"""

from __future__ import annotations

import asyncio
import sys

from backend.config import DEFAULT_CONFIG, EngineConfig
from backend.engine.gameplay import MoveScheduler
from backend.models.events import (
    AutoSolveCancelled,
    GameEvent,
    InvalidMoveAttempted,
    Outcome,
    Phase,
    Rejection,
    Result,
    Solved,
)
from backend.models.highscore import HighScoreManager
from backend.models.pegs import Peg
from frontend.cli.input_handler import get_key, get_key_timeout


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected)

_PEG_ACTIONS = {"peg_a": Peg.A, "peg_b": Peg.B, "peg_c": Peg.C}

_REJECTIONS = {
    Rejection.EMPTY_PEG: f"{_Y}That peg is empty.{_R}",
    Rejection.INVALID_MOVE: f"{_RED}Illegal: larger disk on a smaller one.{_R}",
    Rejection.SAME_PEG: f"{_DIM}Selection cancelled.{_R}",
    Rejection.AUTO_PLAY_ACTIVE: f"{_Y}Demo running — X to stop.{_R}",
    Rejection.MOVE_IN_PROGRESS: f"{_Y}A disk is still moving.{_R}",
    Rejection.NO_SELECTION: f"{_Y}Pick a source peg first.{_R}",
    Rejection.PUZZLE_SOLVED: f"{_G}Solved — R to play again.{_R}",
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- peg rendering ------------------------------------------------------------


def _render_pegs(
    pegs: tuple[tuple[int, ...], ...] | list[list[int]],
    disk_count: int,
    selected: Peg | None = None,
    flying: tuple[int, Peg] | None = None,
) -> str:
    """Return an ANSI text picture of the pegs, bottom row last."""
    width = 2 * disk_count + 1

    def disk(size: int) -> str:
        return ("=" * (2 * size - 1)).center(width)

    header = ""
    for peg in Peg:
        label = f" {peg.value} ".center(width)
        header += f" {_BG_SEL}{label}{_R} " if peg == selected else f" {_C}{label}{_R} "

    air = [" " * width for _ in Peg]
    if flying is not None:
        size, over = flying
        air[over.index] = f"{_Y}{disk(size)}{_R}"
    lines = [header, " " + "  ".join(air)]

    for level in range(disk_count - 1, -1, -1):
        row: list[str] = []
        for stack in pegs:
            if level < len(stack):
                row.append(disk(stack[level]))
            else:
                row.append(f"{_DIM}{'|'.center(width)}{_R}")
        lines.append(" " + "  ".join(row))
    lines.append(" " + "  ".join("-" * width for _ in Peg))
    return "\n".join(lines)


# -- application --------------------------------------------------------------


class VanillaApp:
    def __init__(self, disks: int, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.manager = HighScoreManager()
        self.scheduler = MoveScheduler(
            disks, animator=self, config=config, scores=self.manager
        )
        self.scheduler.subscribe(self._on_event)
        self._sel_disks = self.scheduler.state.disk_count
        self._status = ""
        self._last_win: Solved | None = None

    def _on_event(self, event: GameEvent) -> None:
        if isinstance(event, InvalidMoveAttempted):
            self._status = _REJECTIONS[event.reason]
        elif isinstance(event, Solved):
            self._last_win = event
            self._status = f"{_G}Solved in {event.move_count} moves!{_R}"
        elif isinstance(event, AutoSolveCancelled):
            self._status = f"{_Y}Demo stopped after {event.moves_completed} moves.{_R}"

    async def animate_transfer(self, disk: int, source: Peg, target: Peg) -> None:
        snap = self.scheduler.snapshot()
        pegs = [list(stack) for stack in snap.pegs]
        if pegs[target.index] and pegs[target.index][-1] == disk:
            pegs[target.index].pop()
        for over in (source, target):
            self._show_game(pegs=pegs, flying=(disk, over))
            await asyncio.sleep(self.config.animation_duration / 2)
        await asyncio.sleep(self.config.settle_margin)

    # -- screens --------------------------------------------------------------

    def _show_menu(self) -> None:
        _clear()
        print()
        print(f"  {_BOLD}======================================{_R}")
        print(f"  {_BOLD}      T O W E R   O F   H A N O I     {_R}")
        print(f"  {_BOLD}======================================{_R}")
        print()
        disks_str = ""
        for n in range(self.config.min_disks, self.config.max_disks + 1):
            if n == self._sel_disks:
                disks_str += f" {_BG_SEL} {n} {_R}"
            else:
                disks_str += f" {_DIM}{n}{_R}"
        print(f"    Disks:{disks_str}")
        print(f"    {_DIM}← → to change{_R}")
        print()
        print(f"    {_C}P{_R}  Play")
        print(f"    {_Y}D{_R}  Demo")
        print(f"    {_DIM}S{_R}  Scores")
        print(f"    {_DIM}Q{_R}  Quit")
        print()

    def _show_game(
        self,
        pegs: list[list[int]] | None = None,
        flying: tuple[int, Peg] | None = None,
    ) -> None:
        _clear()
        snap = self.scheduler.snapshot()
        title = "Demo" if snap.phase is Phase.AUTO_PLAYING else "Tower of Hanoi"
        print(f"  {_C}=== {title} ({snap.disk_count} disks) ==={_R}")
        print()
        print(_render_pegs(pegs if pegs is not None else snap.pegs, snap.disk_count,
                           selected=snap.selected, flying=flying))
        print()
        print(
            f"  Moves: {_Y}{snap.move_count}{_R}  |  Minimum: {_Y}{snap.optimal}{_R}  |  "
            f"Score: {_Y}{self.scheduler.score_preview}{_R}  |  "
            f"Best: {_Y}{self.scheduler.best_score}{_R}"
        )
        if self._status:
            print(f"  {self._status}")
        print(
            f"  {_C}1 2 3{_R}: pegs  |  {_C}N{_R}: hint  |  {_C}D{_R}: demo  |  "
            f"{_C}X{_R}: stop  |  {_C}R{_R}: restart  |  {_C}Q{_R}: back"
        )
        sys.stdout.flush()

    def _show_highscores(self) -> None:
        _clear()
        print()
        print(f"  {_BOLD}=== SCORES (best {self.manager.best}) ==={_R}")
        sizes = self.manager.get_all_sizes()
        if not sizes:
            print(f"\n  {_DIM}No scores this session yet.{_R}")
        for disks in sizes:
            print(f"\n  {_C}--- {disks} disks ---{_R}")
            for i, e in enumerate(self.manager.get_scores(disks)[:10], 1):
                print(
                    f"  {i:>2}. {_Y}{e.score:>5}{_R} pts  "
                    f"{_Y}{e.moves:>5}{_R} moves  {_DIM}({e.date}){_R}"
                )
        print(f"\n  {_DIM}Press any key to go back.{_R}")

    # -- game loops -----------------------------------------------------------

    def _describe(self, result: Result) -> None:
        if result.outcome is Outcome.ACCEPTED:
            self._status = f"{_C}Now choose the destination peg.{_R}"
        elif result.outcome is Outcome.CANCELLED:
            self._status = f"{_DIM}Selection cancelled.{_R}"
        elif result.outcome is Outcome.APPLIED and self._last_win is None:
            self._status = ""
        elif result.reason is not None:
            self._status = _REJECTIONS[result.reason]

    async def _demo(self) -> None:
        runner = asyncio.create_task(self.scheduler.run_auto_solve(self._sel_disks))
        while not runner.done():
            key = await asyncio.to_thread(get_key_timeout, 0.1)
            if key in ("cancel", "quit", "restart"):
                self.scheduler.cancel_auto_solve()
        await runner

    async def play(self, demo: bool = False) -> None:
        self.scheduler.reset(self._sel_disks)
        self._last_win = None
        self._status = ""
        if demo:
            await self._demo()

        while True:
            self._show_game()
            if self._last_win is not None and not self._last_win.auto:
                print(f"\n  {_G}★ Score {self._last_win.score}{_R}"
                      + (f"  {_Y}New best!{_R}" if self._last_win.is_new_best else ""))
            key = await asyncio.to_thread(get_key)

            if key in _PEG_ACTIONS:
                self._describe(await self.scheduler.select(_PEG_ACTIONS[key]))
            elif key == "hint":
                move = self.scheduler.hint()
                if move is not None:
                    self._describe(await self.scheduler.request_move(move.source, move.target))
            elif key == "solve":
                self._last_win = None
                await self._demo()
            elif key == "restart":
                self.scheduler.reset(self._sel_disks)
                self._last_win = None
                self._status = ""
            elif key == "quit":
                return

    async def main(self) -> None:
        while True:
            self._show_menu()
            key = await asyncio.to_thread(get_key)

            if key == "quit":
                _clear()
                print("  Goodbye!\n")
                return
            elif key == "left":
                self._sel_disks = max(self.config.min_disks, self._sel_disks - 1)
            elif key == "right":
                self._sel_disks = min(self.config.max_disks, self._sel_disks + 1)
            elif key in ("play", "enter", "peg_a"):
                await self.play()
            elif key == "solve":
                await self.play(demo=True)
            elif key in ("scores", "help"):
                self._show_highscores()
                await asyncio.to_thread(get_key)


# -- public entry point -------------------------------------------------------


def run(disks: int, config: EngineConfig = DEFAULT_CONFIG, demo: bool = False) -> None:
    """Launch the vanilla CLI with interactive menu."""
    app = VanillaApp(disks, config)
    asyncio.run(app.play(demo=True) if demo else app.main())

"""Rich terminal frontend — styled pegs, panels and animated transfers.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  The app is the scheduler's
rendering collaborator: it listens to game events and implements
``animate_transfer`` by drawing the disk in flight.
"""

from __future__ import annotations

import asyncio

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import DEFAULT_CONFIG, EngineConfig
from backend.engine.gameplay import MoveScheduler
from backend.models.events import (
    AutoSolveCancelled,
    GameEvent,
    InvalidMoveAttempted,
    MoveApplied,
    Outcome,
    Phase,
    Rejection,
    Result,
    Snapshot,
    Solved,
)
from backend.models.highscore import HighScoreManager
from backend.models.pegs import Peg
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_PEG_ACTIONS = {"peg_a": Peg.A, "peg_b": Peg.B, "peg_c": Peg.C}

_DISK_STYLES = [
    "bold red",
    "bold dark_orange",
    "bold yellow",
    "bold green",
    "bold cyan",
    "bold blue",
    "bold magenta",
    "bold bright_red",
    "bold bright_green",
    "bold bright_blue",
]

_REJECTIONS = {
    Rejection.EMPTY_PEG: "[yellow]That peg is empty — pick another source.[/yellow]",
    Rejection.INVALID_MOVE: "[red]Illegal move: a larger disk cannot go on a smaller one.[/red]",
    Rejection.SAME_PEG: "[dim]Selection cancelled.[/dim]",
    Rejection.AUTO_PLAY_ACTIVE: "[yellow]Demo running — press X to stop it.[/yellow]",
    Rejection.MOVE_IN_PROGRESS: "[yellow]Wait, a disk is still moving.[/yellow]",
    Rejection.NO_SELECTION: "[yellow]Pick a source peg first.[/yellow]",
    Rejection.PUZZLE_SOLVED: "[green]Already solved — press R to play again.[/green]",
}


# -- peg rendering ------------------------------------------------------------


def _disk(size: int, width: int) -> Text:
    bar = "█" * (2 * size - 1)
    return Text(bar.center(width), style=_DISK_STYLES[(size - 1) % len(_DISK_STYLES)])


def _render_pegs(
    pegs: tuple[tuple[int, ...], ...] | list[list[int]],
    disk_count: int,
    selected: Peg | None = None,
    flying: tuple[int, Peg] | None = None,
) -> Table:
    """Return a Rich Table with one column per peg, top row for a disk in flight."""
    width = 2 * disk_count + 1
    table = Table(
        show_edge=False,
        box=rich.box.SIMPLE_HEAD,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for peg in Peg:
        style = "bold black on green" if peg == selected else "bold cyan"
        table.add_column(Text(f" {peg.value} ", style=style), width=width, justify="center")

    air = [Text(" " * width) for _ in Peg]
    if flying is not None:
        disk, over = flying
        air[over.index] = _disk(disk, width)
    table.add_row(*air)

    for level in range(disk_count - 1, -1, -1):
        cells: list[Text] = []
        for stack in pegs:
            if level < len(stack):
                cells.append(_disk(stack[level], width))
            else:
                cells.append(Text("│".center(width), style="dim"))
        table.add_row(*cells)

    table.add_row(*[Text("▀" * width, style="bright_black") for _ in Peg])
    return table


def _stats(snap: Snapshot, score: int, best: int) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(snap.move_count), style="bold yellow")
    stats.append("    Minimum: ", style="dim")
    stats.append(str(snap.optimal), style="bold yellow")
    stats.append("    Score: ", style="dim")
    stats.append(str(score), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(best), style="bold yellow")
    return stats


# -- application --------------------------------------------------------------


class RichApp:
    """Menu, play, demo and scores screens around one ``MoveScheduler``."""

    def __init__(
        self,
        disks: int,
        config: EngineConfig = DEFAULT_CONFIG,
        manager: HighScoreManager | None = None,
    ) -> None:
        self.config = config
        self.manager = manager if manager is not None else HighScoreManager()
        self.scheduler = MoveScheduler(
            disks, animator=self, config=config, scores=self.manager
        )
        self.scheduler.subscribe(self._on_event)
        self._sel_disks = self.scheduler.state.disk_count
        self._status = ""
        self._last_win: Solved | None = None

    # -- collaborator hooks ---------------------------------------------------

    def _on_event(self, event: GameEvent) -> None:
        if isinstance(event, MoveApplied):
            self._status = (
                "[cyan]Demo running… press X to stop.[/cyan]"
                if event.auto
                else "[dim]Move played. Keep going![/dim]"
            )
        elif isinstance(event, InvalidMoveAttempted):
            self._status = _REJECTIONS[event.reason]
        elif isinstance(event, Solved):
            self._last_win = event
            self._status = (
                f"[bold green]Demo finished in {event.move_count} moves (optimal).[/bold green]"
                if event.auto
                else f"[bold green]Solved in {event.move_count} moves![/bold green]"
            )
        elif isinstance(event, AutoSolveCancelled):
            self._status = (
                f"[yellow]Demo stopped after {event.moves_completed} moves.[/yellow]"
            )

    async def animate_transfer(self, disk: int, source: Peg, target: Peg) -> None:
        """Lift *disk* over *source*, glide across, and drop it on *target*."""
        snap = self.scheduler.snapshot()
        pegs = [list(stack) for stack in snap.pegs]
        landing = pegs[target.index]
        if landing and landing[-1] == disk:
            landing.pop()

        step = 1 if target.index > source.index else -1
        path = [Peg.parse(i) for i in range(source.index, target.index + step, step)]
        delay = self.config.animation_duration / len(path)
        for peg in path:
            self._draw_game(pegs=pegs, flying=(disk, peg))
            await asyncio.sleep(delay)
        await asyncio.sleep(self.config.settle_margin)
        self._draw_game()

    # -- screens --------------------------------------------------------------

    def _draw_menu(self) -> None:
        console.clear()

        disks = Text()
        for n in range(self.config.min_disks, self.config.max_disks + 1):
            if n > self.config.min_disks:
                disks.append(" ")
            if n == self._sel_disks:
                disks.append(f" {n} ", style="bold green on #313244")
            else:
                disks.append(f" {n} ", style="dim")

        nav = Text("  ← →  number of disks", style="dim")

        opts = Text()
        opts.append("  P", style="bold cyan")
        opts.append("  Play    ")
        opts.append("D", style="bold yellow")
        opts.append("  Demo    ")
        opts.append("S", style="dim bold")
        opts.append("  Scores    ", style="dim")
        opts.append("Q", style="dim bold")
        opts.append("  Quit", style="dim")

        body = Group(
            Text(""),
            Align.center(disks),
            Align.center(nav),
            Text(""),
            Align.center(opts),
            Text(""),
        )
        panel = Panel(
            body,
            title="[bold]T O W E R   O F   H A N O I[/bold]",
            border_style="bright_blue",
            padding=(1, 4),
        )
        console.print()
        console.print(Align.center(panel))

    def _draw_game(
        self,
        pegs: list[list[int]] | None = None,
        flying: tuple[int, Peg] | None = None,
    ) -> None:
        console.clear()
        snap = self.scheduler.snapshot()
        demo = snap.phase is Phase.AUTO_PLAYING
        table = _render_pegs(
            pegs if pegs is not None else snap.pegs,
            snap.disk_count,
            selected=snap.selected,
            flying=flying,
        )

        controls = Text()
        controls.append("  1 2 3", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("A B C", style="bold cyan")
        controls.append("  pegs   ", style="dim")
        controls.append("N", style="bold cyan")
        controls.append("  hint   ", style="dim")
        controls.append("D", style="bold yellow")
        controls.append("  demo   ", style="dim")
        controls.append("X", style="bold yellow")
        controls.append("  stop demo   ", style="dim")
        controls.append("R", style="bold cyan")
        controls.append("  restart   ", style="dim")
        controls.append("Q", style="bold cyan")
        controls.append("  back", style="dim")

        title = "Demo" if demo else "Tower of Hanoi"
        colour = "yellow" if demo else "cyan"
        panel = Panel(
            Align.center(table),
            title=f"[bold {colour}]{title}  {snap.disk_count} disks[/bold {colour}]",
            border_style="yellow" if demo else "bright_blue",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(
            Align.center(
                _stats(snap, self.scheduler.score_preview, self.scheduler.best_score)
            )
        )
        if self._status:
            console.print(Align.center(Text.from_markup(f"  {self._status}")))
        console.print(Align.center(controls))

    def _draw_win(self, win: Solved) -> None:
        console.clear()
        snap = self.scheduler.snapshot()

        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        if win.move_count == win.optimal:
            congrats.append("PERFECT!", style="bold green")
            congrats.append("  Solved in the minimum number of moves.  ", style="green")
        else:
            congrats.append("CONGRATULATIONS!", style="bold green")
            congrats.append(f"  Minimum possible: {win.optimal}.  ", style="green")
        congrats.append("★\n", style="bold yellow")

        stats = Text()
        stats.append("  Moves: ", style="dim")
        stats.append(str(win.move_count), style="bold yellow")
        stats.append("    Score: ", style="dim")
        stats.append(str(win.score), style="bold yellow")
        if win.is_new_best:
            stats.append("    New best score!", style="bold magenta")

        group = Group(
            Align.center(_render_pegs(snap.pegs, snap.disk_count)),
            Align.center(congrats),
            Align.center(stats),
        )
        panel = Panel(
            group,
            title=f"[bold green]Tower of Hanoi  {snap.disk_count} disks[/bold green]",
            border_style="bold green",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(
            Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
        )

    def _draw_highscores(self) -> None:
        console.clear()

        sizes = self.manager.get_all_sizes()
        parts: list[Align] = []
        if not sizes:
            parts.append(Align.center(Text("  No scores this session yet.", style="dim")))
        else:
            for disks in sizes:
                hs_table = Table(
                    title=f"{disks} disks",
                    title_style="bold cyan",
                    box=rich.box.ROUNDED,
                    border_style="dim",
                )
                hs_table.add_column("#", justify="right", style="dim", width=3)
                hs_table.add_column("Score", justify="right", style="yellow")
                hs_table.add_column("Moves", justify="right", style="yellow")
                hs_table.add_column("Date", style="dim")
                for i, e in enumerate(self.manager.get_scores(disks)[:10], 1):
                    hs_table.add_row(str(i), str(e.score), str(e.moves), e.date)
                parts.append(Align.center(hs_table))

        panel = Panel(
            Group(*parts),
            title=f"[bold]SCORES  (best {self.manager.best})[/bold]",
            border_style="bright_blue",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))

    # -- game loops -----------------------------------------------------------

    def _describe(self, result: Result) -> None:
        if result.outcome is Outcome.ACCEPTED:
            self._status = "[cyan]Now choose the destination peg.[/cyan]"
        elif result.outcome is Outcome.CANCELLED:
            self._status = "[dim]Selection cancelled.[/dim]"
        elif result.outcome is Outcome.REJECTED and result.reason is not None:
            self._status = _REJECTIONS[result.reason]

    async def _demo(self) -> None:
        """Replay the optimal plan while still listening for X / Q."""
        runner = asyncio.create_task(self.scheduler.run_auto_solve(self._sel_disks))
        while not runner.done():
            key = await asyncio.to_thread(get_key_timeout, 0.1)
            if key in ("cancel", "quit", "restart"):
                self.scheduler.cancel_auto_solve()
            elif key in _PEG_ACTIONS:
                self._describe(self.scheduler.select_source(_PEG_ACTIONS[key]))
        await runner

    async def play(self, demo: bool = False) -> None:
        self.scheduler.reset(self._sel_disks)
        self._status = "Pick a source peg, then a destination peg."
        self._last_win = None
        if demo:
            await self._demo()

        while True:
            if self.scheduler.phase is Phase.SOLVED and self._last_win is not None:
                if not self._last_win.auto:
                    self._draw_win(self._last_win)
                    key = await asyncio.to_thread(get_key)
                    if key == "quit":
                        return
                    if key in ("restart", "enter"):
                        self.scheduler.reset(self._sel_disks)
                        self._last_win = None
                        self._status = ""
                    continue

            self._draw_game()
            key = await asyncio.to_thread(get_key)

            if key in _PEG_ACTIONS:
                self._describe(await self.scheduler.select(_PEG_ACTIONS[key]))
            elif key == "hint":
                move = self.scheduler.hint()
                if move is None:
                    self._status = "[green]Already solved![/green]"
                else:
                    result = await self.scheduler.request_move(move.source, move.target)
                    self._describe(result)
                    if result.outcome is Outcome.APPLIED and self._last_win is None:
                        self._status = f"[cyan]Hint:[/cyan] moved [bold]{move}[/bold]"
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
            self._draw_menu()
            key = await asyncio.to_thread(get_key)

            if key == "quit":
                console.clear()
                console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
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
                self._draw_highscores()
                await asyncio.to_thread(get_key)


# -- public entry point -------------------------------------------------------


def run(disks: int, config: EngineConfig = DEFAULT_CONFIG, demo: bool = False) -> None:
    """Launch the Rich CLI with interactive menu."""
    app = RichApp(disks, config)
    if demo:
        asyncio.run(app.play(demo=True))
    else:
        asyncio.run(app.main())

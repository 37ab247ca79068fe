#!/usr/bin/env python3
"""Tower of Hanoi.

Usage::

    python main.py                  # interactive menu
    python main.py -f rich -n 5     # Rich terminal, 5 disks
    python main.py -f vanilla --demo
    python main.py --plan -n 3      # print the optimal plan and exit
"""

import dataclasses
import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_CONFIG, EngineConfig  # noqa: E402
from backend.logging_utils import configure_logging  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _print_plan(disks: int) -> None:
    from backend.engine.gamegenerator import GameGenerator
    from backend.engine.gamesolver import Solver

    disks = GameGenerator.clamp(disks)
    plan = Solver.plan(disks)
    print(f"\n  === OPTIMAL PLAN ({disks} disks, {len(plan)} moves) ===")
    for i, move in enumerate(plan, 1):
        print(f"  {i:>4}. {move.source.value} -> {move.target.value}")
    print()


def _ask_disks() -> int:
    raw = input("  Disks (1-10, default 3): ").strip() or "3"
    try:
        disks = int(raw)
    except ValueError:
        print("  Invalid number — using 3.")
        disks = 3
    return disks


def _menu_loop(config: EngineConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("      T O W E R   O F   H A N O I    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Show optimal plan")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            frontend = {"1": Frontend.vanilla, "2": Frontend.rich}[choice]
            mod = importlib.import_module(_RUNNERS[frontend])
            mod.run(disks=config.default_disks, config=config)

        elif choice == "3":
            _print_plan(_ask_disks())

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    disks: int = typer.Option(
        DEFAULT_CONFIG.default_disks, "-n", "--disks",
        min=DEFAULT_CONFIG.min_disks, max=DEFAULT_CONFIG.max_disks, clamp=True,
        help="Number of disks (1-10).",
    ),
    demo: bool = typer.Option(
        False, "--demo",
        help="Start straight into the automatic solver.",
    ),
    plan: bool = typer.Option(
        False, "--plan",
        help="Print the optimal move plan and exit.",
    ),
    any_target: bool = typer.Option(
        False, "--any-target",
        help="Also accept a full tower on peg B as a win.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Tower of Hanoi."""
    configure_logging(log_level)
    config = dataclasses.replace(
        DEFAULT_CONFIG, default_disks=disks, accept_any_target=any_target
    )

    if plan:
        _print_plan(disks)
        return

    if frontend is None:
        _menu_loop(config)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(disks=disks, config=config, demo=demo)


if __name__ == "__main__":
    app()

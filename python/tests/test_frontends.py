"""Frontend smoke tests — key mapping and peg rendering, no terminal needed."""

from __future__ import annotations

import asyncio

import pytest

from backend.config import EngineConfig
from backend.models.pegs import Peg
from frontend.cli.input_handler import _resolve
from frontend.cli.rich.app import RichApp
from frontend.cli.rich.app import _render_pegs as rich_render
from frontend.cli.vanilla.app import _render_pegs as vanilla_render


@pytest.mark.parametrize(
    "ch, action",
    [("1", "peg_a"), ("b", "peg_b"), ("C", "peg_c"), ("x", "cancel"),
     ("v", "solve"), ("n", "hint"), ("\x03", "quit"), ("\x07", "")],
    ids=repr,
)
def test_key_mapping(ch: str, action: str) -> None:
    assert _resolve(ch) == action


def test_rich_table_has_a_row_per_level() -> None:
    table = rich_render(((3, 2, 1), (), ()), 3, selected=Peg.A, flying=(1, Peg.B))
    assert len(table.columns) == 3
    # flight row + one row per disk level + base
    assert table.row_count == 3 + 2


def test_vanilla_picture_shows_every_disk() -> None:
    picture = vanilla_render(((3,), (2,), (1,)), 3)
    assert picture.count("=====") == 1
    assert picture.count("===") == 2
    assert picture.count("=") == 5 + 3 + 1


def test_rich_app_animates_through_the_scheduler(monkeypatch: pytest.MonkeyPatch) -> None:
    frames: list[tuple[int, Peg] | None] = []
    app = RichApp(2, EngineConfig(animation_duration=0.0, settle_margin=0.0, step_delay=0.0))
    monkeypatch.setattr(app, "_draw_game", lambda pegs=None, flying=None: frames.append(flying))

    final = asyncio.run(app.scheduler.run_auto_solve(2))

    assert final.move_count == 3  # type: ignore[union-attr]
    assert (1, Peg.A) in frames and (2, Peg.C) in frames
    assert "Demo finished" in app._status

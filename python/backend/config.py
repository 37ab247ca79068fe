"""Engine settings shared by the scheduler, scorer and frontends."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    min_disks: int = 1
    max_disks: int = 10
    default_disks: int = 3

    score_floor: int = 10
    score_scale: int = 1000

    # seconds
    animation_duration: float = 0.3
    settle_margin: float = 0.04
    step_delay: float = 0.04

    # Win on peg B as well as peg C.
    accept_any_target: bool = False


DEFAULT_CONFIG = EngineConfig()

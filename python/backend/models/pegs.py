"""Peg and move models for the Tower of Hanoi."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Peg(StrEnum):
    A = "A"
    B = "B"
    C = "C"

    @property
    def index(self) -> int:
        return "ABC".index(self.value)

    @classmethod
    def parse(cls, value: Peg | str | int) -> Peg:
        """Accept a ``Peg``, a letter (any case) or an index ``0..2``.

        Example::

            Peg.parse("c") is Peg.C
            Peg.parse(0) is Peg.A
        """
        if isinstance(value, Peg):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a peg: {value!r}")
        if isinstance(value, int):
            if 0 <= value < 3:
                return list(cls)[value]
            raise ValueError(f"Peg index out of range: {value}")
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Not a peg: {value!r}")


@dataclass(frozen=True)
class Move:
    """A request to move the top disk of ``source`` onto ``target``."""

    source: Peg
    target: Peg

    @classmethod
    def of(cls, source: Peg | str | int, target: Peg | str | int) -> Move:
        return cls(Peg.parse(source), Peg.parse(target))

    def __str__(self) -> str:
        return f"{self.source.value}→{self.target.value}"

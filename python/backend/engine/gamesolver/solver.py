"""Optimal three-peg Tower of Hanoi solver."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from backend.models.pegs import Move, Peg


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def plan(
        disk_count: int,
        source: Peg = Peg.A,
        target: Peg = Peg.C,
        aux: Peg = Peg.B,
    ) -> list[Move]:
        """Return the optimal move sequence, ``2**disk_count - 1`` moves long.

        Move the top ``n - 1`` disks out of the way onto *aux*, move disk
        ``n``, then bring the ``n - 1`` disks back on top of it.
        """
        if disk_count < 0:
            raise ValueError("disk_count must not be negative")
        return list(Solver._moves(disk_count, source, target, aux))

    @staticmethod
    def _moves(n: int, source: Peg, target: Peg, aux: Peg) -> Iterator[Move]:
        if n == 0:
            return
        yield from Solver._moves(n - 1, source, aux, target)
        yield Move(source, target)
        yield from Solver._moves(n - 1, aux, target, source)

    @staticmethod
    def hint(pegs: Sequence[Sequence[int]], target: Peg = Peg.C) -> Move | None:
        """Return the first move of a shortest solution from *pegs*.

        Works from any legal position, not only the starting tower.
        Returns ``None`` if every disk already sits on *target*.
        """
        location = {disk: Peg.parse(i) for i, stack in enumerate(pegs) for disk in stack}
        return Solver._first_move(location, len(location), target)

    @staticmethod
    def _first_move(location: dict[int, Peg], n: int, target: Peg) -> Move | None:
        # Disks 1..n must end on *target*; disk n moves at most once.
        while n > 0 and location[n] == target:
            n -= 1
        if n == 0:
            return None
        source = location[n]
        spare = next(p for p in Peg if p not in (source, target))
        return Solver._first_move(location, n - 1, spare) or Move(source, target)

    @staticmethod
    def distance(pegs: Sequence[Sequence[int]], target: Peg = Peg.C) -> int:
        """Number of moves a shortest solution from *pegs* still needs."""
        location = {disk: Peg.parse(i) for i, stack in enumerate(pegs) for disk in stack}
        moves = 0
        for n in range(len(location), 0, -1):
            if location[n] != target:
                moves += 2 ** (n - 1)
                target = next(p for p in Peg if p not in (location[n], target))
        return moves

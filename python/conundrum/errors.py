"""Exceptions raised by the conundrum engine."""

from __future__ import annotations


class ConundrumError(Exception):
    """Base class for all solver errors."""


class InvalidStateError(ConundrumError, ValueError):
    """The arrangement is not a permutation of the board's cell values."""


class NoSolutionError(ConundrumError):
    """The search exhausted the reachable states without finding the goal."""

    def __init__(self, start: tuple[int, ...], explored: int) -> None:
        super().__init__(
            f"Goal is unreachable from {list(start)} "
            f"({explored} states explored)."
        )
        self.start = start
        self.explored = explored

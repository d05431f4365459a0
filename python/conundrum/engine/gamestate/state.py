"""Tracks the mutable state of a puzzle being played or replayed."""

from __future__ import annotations

from conundrum.models.board import Board


class GameState:
    """Holds the current board, move counter, and the tiles moved so far."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.history: list[int] = []

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    def record(self, tile: int) -> None:
        self.history.append(tile)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

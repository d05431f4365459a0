"""Core gameplay logic — applies tile moves and checks the win condition."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from conundrum.engine.gamestate import GameState
from conundrum.models.board import NEIGHBORS, Board


class GamePlay:
    """Orchestrates a single session on one board."""

    def __init__(
        self,
        board: Board,
        neighbors: Mapping[int, tuple[int, ...]] = NEIGHBORS,
    ) -> None:
        self.neighbors = neighbors
        self.state = GameState(board)

    @classmethod
    def from_board(
        cls,
        board: Board,
        neighbors: Mapping[int, tuple[int, ...]] = NEIGHBORS,
    ) -> GamePlay:
        """Create a session on a copy of *board*."""
        return cls(board.copy(), neighbors)

    @classmethod
    def from_flat(
        cls,
        flat: Sequence[int],
        neighbors: Mapping[int, tuple[int, ...]] = NEIGHBORS,
    ) -> GamePlay:
        return cls(Board.from_flat(flat), neighbors)

    # -- movement (the value names the *tile* that slides) --------------------

    def move(self, tile: int) -> bool:
        """Slide *tile* into the adjacent blank.

        Returns True if the tile sat next to the blank and the move was
        applied; the board is left untouched otherwise.
        """
        board = self.state.board
        if tile not in board.cells or tile == 0:
            return False

        target = board.cells.index(tile)
        if target not in self.neighbors[board.blank_pos]:
            return False

        self._swap(board, target)
        self.state.record(tile)
        return True

    def apply(self, moves: Iterable[int]) -> bool:
        """Apply *moves* in order, stopping at the first illegal one."""
        for tile in moves:
            if not self.move(tile):
                return False
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: int) -> None:
        blank = board.blank_pos
        board.cells[blank], board.cells[target] = (
            board.cells[target],
            board.cells[blank],
        )
        board.blank_pos = target

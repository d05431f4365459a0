"""Board model for the eight-cell conundrum puzzle."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from conundrum.errors import InvalidStateError

State = tuple[int, ...]

CELLS = 8
BLANK = 0

# Cell layout is irregular: each cell lists the cells a tile can slide in from.
NEIGHBORS: Mapping[int, tuple[int, ...]] = MappingProxyType({
    0: (1, 2),
    1: (0, 2, 3),
    2: (0, 1, 5),
    3: (1, 4, 6),
    4: (3, 5),
    5: (2, 4, 7),
    6: (3, 7),
    7: (5, 6),
})

GOAL: State = (1, 2, 3, 4, 0, 5, 6, 7)
GOAL_ID = 12340567


def validate_state(state: Sequence[int]) -> State:
    """Return *state* as a tuple, or raise ``InvalidStateError``.

    A valid state holds each value of ``0..7`` exactly once.
    """
    cells = tuple(state)
    if len(cells) != CELLS:
        raise InvalidStateError(
            f"Expected {CELLS} cells, got {len(cells)}."
        )
    for v in cells:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidStateError(f"Cell value {v!r} is not an integer.")
    if BLANK not in cells:
        raise InvalidStateError("State has no blank (0) cell.")
    if sorted(cells) != list(range(CELLS)):
        raise InvalidStateError(
            f"State {list(cells)} is not a permutation of 0..{CELLS - 1}."
        )
    return cells


@dataclass
class Board:
    """Represents one arrangement of the puzzle.

    Cells are stored flat, in the order used by ``NEIGHBORS``. 0 is the blank.
    """

    cells: list[int]
    blank_pos: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Sequence[int]) -> Board:
        """Create a board from a flat cell list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 0, 6, 7])
        """
        cells = validate_state(flat)
        return cls(cells=list(cells), blank_pos=cells.index(BLANK))

    @classmethod
    def solved(cls) -> Board:
        return cls.from_flat(GOAL)

    # -- queries --------------------------------------------------------------

    def state(self) -> State:
        return tuple(self.cells)

    def is_solved(self) -> bool:
        return self.state() == GOAL

    def copy(self) -> Board:
        return Board(cells=self.cells[:], blank_pos=self.blank_pos)

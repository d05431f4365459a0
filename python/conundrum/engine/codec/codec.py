"""Integer identifiers for board states.

A state's identifier reads its cells as the digits of a base-10 number,
most significant first, so ``(1, 2, 3, 4, 0, 5, 6, 7)`` maps to
``12340567``. The mapping is a bijection over permutations of ``0..7``.
"""

from __future__ import annotations

from collections.abc import Sequence

from conundrum.errors import InvalidStateError
from conundrum.models.board import BLANK, CELLS, State

# POWS[i] is the weight of cell i.
POWS: tuple[int, ...] = tuple(10 ** (CELLS - 1 - i) for i in range(CELLS))


def identifier(state: Sequence[int]) -> int:
    """Return the integer identifier of *state*."""
    res = 0
    for i, v in enumerate(state):
        res += v * POWS[i]
    return res


def from_identifier(state_id: int) -> State:
    """Inverse of ``identifier``.

    The blank may occupy cell 0, so the number is padded back to full width.
    """
    digits = str(state_id).zfill(CELLS)
    if len(digits) != CELLS or not digits.isdigit():
        raise InvalidStateError(f"{state_id} is not a state identifier.")
    return tuple(int(d) for d in digits)


def blank_position(state: Sequence[int]) -> int:
    """Return the index of the blank cell."""
    for i, v in enumerate(state):
        if v == BLANK:
            return i
    raise InvalidStateError(f"State {list(state)} has no blank (0) cell.")

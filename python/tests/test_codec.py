"""State codec tests."""

from __future__ import annotations

import itertools

import pytest

from conundrum.engine.codec import blank_position, from_identifier, identifier
from conundrum.errors import InvalidStateError
from conundrum.models.board import GOAL, GOAL_ID


def test_goal_identifier() -> None:
    assert identifier(GOAL) == GOAL_ID == 12340567


def test_leading_blank() -> None:
    state = (0, 1, 2, 3, 4, 5, 6, 7)
    assert identifier(state) == 1234567
    assert from_identifier(1234567) == state


def test_trailing_blank() -> None:
    assert identifier([7, 6, 5, 4, 3, 2, 1, 0]) == 76543210


def test_identifier_is_injective_over_permutations() -> None:
    perms = list(itertools.permutations(range(8)))
    ids = {identifier(p) for p in perms}
    assert len(ids) == len(perms)


@pytest.mark.parametrize(
    "state",
    [GOAL, (7, 6, 5, 4, 3, 2, 1, 0), (3, 0, 7, 1, 6, 2, 5, 4)],
)
def test_from_identifier_inverts(state: tuple[int, ...]) -> None:
    assert from_identifier(identifier(state)) == state


def test_from_identifier_rejects_oversized() -> None:
    with pytest.raises(InvalidStateError):
        from_identifier(123456789)


@pytest.mark.parametrize(
    "state, expected",
    [(GOAL, 4), ((0, 1, 2, 3, 4, 5, 6, 7), 0), ((1, 2, 3, 4, 5, 6, 7, 0), 7)],
)
def test_blank_position(state: tuple[int, ...], expected: int) -> None:
    assert blank_position(state) == expected


def test_blank_position_without_blank() -> None:
    with pytest.raises(InvalidStateError):
        blank_position([1, 2, 3, 4, 5, 6, 7, 8])

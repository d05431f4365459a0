"""Shortest-path solver for the eight-cell conundrum sliding puzzle."""

from conundrum.engine.codec import blank_position, from_identifier, identifier
from conundrum.engine.gameplay import GamePlay
from conundrum.engine.solver import SearchResult, Solver, possible_moves, resolve
from conundrum.errors import ConundrumError, InvalidStateError, NoSolutionError
from conundrum.models.board import GOAL, GOAL_ID, NEIGHBORS, Board

__all__ = [
    "GOAL",
    "GOAL_ID",
    "NEIGHBORS",
    "Board",
    "ConundrumError",
    "GamePlay",
    "InvalidStateError",
    "NoSolutionError",
    "SearchResult",
    "Solver",
    "blank_position",
    "from_identifier",
    "identifier",
    "possible_moves",
    "resolve",
]

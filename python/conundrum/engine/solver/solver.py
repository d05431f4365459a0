"""Breadth-first solver for the conundrum puzzle.

States are expanded in FIFO order with neighbors taken in table order, so the
first time the goal is dequeued its parent chain is a shortest path, and ties
between equally short paths always break the same way.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from conundrum.engine.codec import blank_position, identifier
from conundrum.errors import NoSolutionError
from conundrum.models.board import GOAL, NEIGHBORS, Board, State, validate_state

logger = logging.getLogger(__name__)


class _Node(NamedTuple):
    state: State
    id: int
    parent: int | None  # index into the per-search arena


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single search."""

    moves: tuple[int, ...]
    path: tuple[State, ...]
    expanded: int
    generated: int

    @property
    def length(self) -> int:
        return len(self.moves)


class Solver:
    """Shortest-path solver over a fixed cell topology.

    Holds only immutable configuration; every search allocates its own
    queue and visited map, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        neighbors: Mapping[int, tuple[int, ...]] = NEIGHBORS,
        goal: Sequence[int] = GOAL,
    ) -> None:
        self.neighbors = neighbors
        self.goal: State = validate_state(goal)
        self.goal_id = identifier(self.goal)

    # -- expansion ------------------------------------------------------------

    def possible_moves(self, state: Sequence[int]) -> list[State]:
        """Return every state one slide away from *state*."""
        zero = blank_position(state)
        res: list[State] = []
        for j in self.neighbors[zero]:
            cells = list(state)
            cells[zero], cells[j] = cells[j], cells[zero]
            res.append(tuple(cells))
        return res

    # -- search ---------------------------------------------------------------

    def search(self, state: Sequence[int]) -> SearchResult:
        """Run the breadth-first search from *state* to the goal.

        Raises ``InvalidStateError`` for malformed input and
        ``NoSolutionError`` if the goal is not reachable.
        """
        start = validate_state(state)
        start_id = identifier(start)

        nodes: list[_Node] = [_Node(start, start_id, None)]
        visited: dict[int, int] = {start_id: 0}
        queue: deque[int] = deque([0])
        expanded = generated = 0

        logger.debug("Searching from %s", list(start))
        while queue:
            current = queue.popleft()
            node = nodes[current]
            if node.id == self.goal_id:
                path = self._build_path(nodes, current)
                moves = tuple(self._convert_path(path))
                logger.debug(
                    "Solved in %d moves (%d expanded, %d generated, %d visited)",
                    len(moves), expanded, generated, len(nodes),
                )
                return SearchResult(
                    moves=moves, path=path,
                    expanded=expanded, generated=generated,
                )

            expanded += 1
            for successor in self.possible_moves(node.state):
                generated += 1
                succ_id = identifier(successor)
                if succ_id in visited:
                    continue
                visited[succ_id] = len(nodes)
                nodes.append(_Node(successor, succ_id, current))
                queue.append(len(nodes) - 1)

        logger.debug("Exhausted %d states without reaching the goal", len(nodes))
        raise NoSolutionError(start, len(nodes))

    def resolve(self, state: Sequence[int]) -> list[int]:
        """Return the tile values to slide into the blank, in order."""
        return list(self.search(state).moves)

    # -- board-level helpers --------------------------------------------------

    def solve(self, board: Board) -> list[int]:
        """Return a shortest move sequence for *board* (``[]`` if solved)."""
        return self.resolve(board.cells)

    def hint(self, board: Board) -> int | None:
        """Return the next tile to move, or ``None`` if already solved."""
        moves = self.solve(board)
        return moves[0] if moves else None

    def distance(self, board: Board) -> int:
        """Return the minimum number of slides from *board* to the goal."""
        return self.search(board.cells).length

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _build_path(nodes: list[_Node], end: int) -> tuple[State, ...]:
        res: list[State] = []
        index: int | None = end
        while index is not None:
            node = nodes[index]
            res.append(node.state)
            index = node.parent
        res.reverse()
        return tuple(res)

    @staticmethod
    def _convert_path(path: tuple[State, ...]) -> list[int]:
        # The tile that moved sits, before the slide, where the blank lands.
        return [
            before[blank_position(after)]
            for before, after in zip(path, path[1:])
        ]


_DEFAULT = Solver()


def possible_moves(state: Sequence[int]) -> list[State]:
    """Expand *state* on the standard board."""
    return _DEFAULT.possible_moves(state)


def resolve(state: Sequence[int]) -> list[int]:
    """Solve *state* on the standard board.

    Example::

        >>> resolve([1, 2, 3, 4, 5, 0, 6, 7])
        [5]
    """
    return _DEFAULT.resolve(state)

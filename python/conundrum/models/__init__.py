from conundrum.models.board import (
    CELLS,
    GOAL,
    GOAL_ID,
    NEIGHBORS,
    Board,
    State,
    validate_state,
)

__all__ = [
    "CELLS",
    "GOAL",
    "GOAL_ID",
    "NEIGHBORS",
    "Board",
    "State",
    "validate_state",
]

"""Core game logic for Isola."""

from .state import (
    CELLS,
    COLS,
    DIRECTIONS,
    PLAYER_ONE_START,
    PLAYER_TWO_START,
    ROWS,
    Action,
    Coordinate,
    GameState,
    Player,
    in_bounds,
    render_board,
)
from .rules import (
    ACTION_VECTOR_SIZE,
    DEFAULT_SEARCH_DEPTH,
    WIN_UTILITY,
    cell_from_index,
    cell_index,
    decode_action,
    encode_action,
    legal_action_mask,
)

__all__ = [
    "GameState",
    "Player",
    "Coordinate",
    "Action",
    "ROWS",
    "COLS",
    "CELLS",
    "DIRECTIONS",
    "PLAYER_ONE_START",
    "PLAYER_TWO_START",
    "ACTION_VECTOR_SIZE",
    "DEFAULT_SEARCH_DEPTH",
    "WIN_UTILITY",
    "in_bounds",
    "render_board",
    "cell_index",
    "cell_from_index",
    "encode_action",
    "decode_action",
    "legal_action_mask",
]

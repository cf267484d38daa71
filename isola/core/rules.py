from __future__ import annotations

import numpy as np

from .state import (
    CELLS,
    COLS,
    Action,
    Coordinate,
    GameState,
    in_bounds,
)

ACTION_VECTOR_SIZE = CELLS * CELLS
WIN_UTILITY = 1e9
DEFAULT_SEARCH_DEPTH = 3


def cell_index(cell: Coordinate) -> int:
    if not in_bounds(cell.row, cell.col):
        raise ValueError(f"Cell {cell} is outside the board.")
    return cell.row * COLS + cell.col


def cell_from_index(index: int) -> Coordinate:
    if not 0 <= index < CELLS:
        raise ValueError("Cell index out of range.")
    return Coordinate(index // COLS, index % COLS)


def encode_action(action: Action) -> int:
    return cell_index(action.destination) * CELLS + cell_index(action.removal)


def decode_action(index: int) -> Action:
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    destination, removal = divmod(index, CELLS)
    return Action(cell_from_index(destination), cell_from_index(removal))


def legal_action_mask(state: GameState) -> np.ndarray:
    mask = np.zeros(ACTION_VECTOR_SIZE, dtype=np.int8)
    for action in state.legal_actions():
        mask[encode_action(action)] = 1
    return mask

from __future__ import annotations

import numpy as np

from isola.core import COLS, ROWS, GameState

BOARD_CHANNELS = 3  # available cells, side-to-move token, opponent token


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (3, 6, 8) channel-first, seen from the side to move."""
    tensor = np.zeros((BOARD_CHANNELS, ROWS, COLS), dtype=np.float32)
    tensor[0] = state.available.astype(np.float32)
    own = state.active_position
    other = state.opponent_position
    tensor[1, own.row, own.col] = 1.0
    tensor[2, other.row, other.col] = 1.0
    return tensor

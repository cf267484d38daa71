from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from isola.core import (
    ACTION_VECTOR_SIZE,
    COLS,
    ROWS,
    GameState,
    decode_action,
    legal_action_mask,
    render_board,
)
from isola.features import BOARD_CHANNELS, build_board_tensor


class IsolaEnv(gym.Env):
    """Two-player Isola as a single gymnasium environment.

    Both sides act through ``step``; observations are always from the
    perspective of the side to move, and the reward goes to the player who
    just moved.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        randomize_first_player: bool = False,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._randomize_first = randomize_first_player
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=0.0,
            high=1.0,
            shape=(BOARD_CHANNELS, ROWS, COLS),
            dtype=np.float32,
        )
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self._state = GameState.initial()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        randomize = options.get("randomize_first_player", self._randomize_first) if options else self._randomize_first
        self._state = GameState.initial(randomize, rng=self.np_random)
        observation = build_board_tensor(self._state)
        info = self._build_info()
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._state.is_terminal:
            raise ValueError("Cannot step a finished game; call reset().")

        legal_mask = legal_action_mask(self._state)
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        mover = self._state.current_player
        self._state = self._state.apply(decode_action(int(action_index)))

        observation = build_board_tensor(self._state)
        info = self._build_info()

        winner = self._state.winner_if_terminal()
        terminated = winner != 0
        reward = 1.0 if winner == int(mover) else 0.0
        return observation, reward, terminated, False, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_action_mask(self._state)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return render_board(self._state)

    # ------------------------------------------------------------------
    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": legal_action_mask(self._state),
            "current_player": int(self._state.current_player),
        }

from __future__ import annotations

from typing import Optional

import numpy as np

from isola.core import Action, GameState

from .base import Agent


class RandomAgent(Agent):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, state: GameState) -> Action:
        actions = state.legal_actions()
        if not actions:
            raise ValueError("Cannot choose an action from a terminal state.")
        return actions[int(self.rng.integers(len(actions)))]

    def name(self) -> str:
        return "Random Agent"

    def spawn(self, seed: Optional[int] = None) -> "RandomAgent":
        return RandomAgent(np.random.default_rng(seed))

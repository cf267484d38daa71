from __future__ import annotations

from copy import deepcopy
from typing import Optional

import numpy as np

from isola.core import Action, GameState
from isola.heuristics import Heuristic
from isola.search import AlphaBetaSearch, SearchConfig, SearchResult

from .base import Agent


class MinimaxAgent(Agent):
    def __init__(
        self,
        heuristic: Heuristic,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._config = deepcopy(config) if config else SearchConfig()
        self.heuristic = heuristic
        self.search = AlphaBetaSearch(
            heuristic,
            config=self._config,
            rng=rng or np.random.default_rng(),
        )

    @property
    def depth(self) -> int:
        return self._config.max_depth

    def choose(self, state: GameState) -> Action:
        return self.search.run(state).action

    def analyse(self, state: GameState) -> SearchResult:
        return self.search.run(state)

    def name(self) -> str:
        return f"Minimax(d={self.depth}, {self.heuristic.name})"

    def spawn(self, seed: Optional[int] = None) -> "MinimaxAgent":
        rng = np.random.default_rng(seed)
        return MinimaxAgent(self.heuristic, config=self._config, rng=rng)

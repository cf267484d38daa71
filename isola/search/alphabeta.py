from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from isola.core import DEFAULT_SEARCH_DEPTH, WIN_UTILITY, Action, GameState, Player
from isola.heuristics import Heuristic

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    max_depth: int = DEFAULT_SEARCH_DEPTH
    randomize_order: bool = True
    # Replace the incumbent root action on an exact tie with probability 1/2.
    random_tie_break: bool = True
    prune: bool = True

    def __post_init__(self) -> None:
        self.max_depth = max(1, int(self.max_depth))


@dataclass
class SearchResult:
    action: Action
    score: float
    nodes: int


class AlphaBetaSearch:
    """Depth-limited minimax with alpha-beta pruning.

    Frontier states are scored by the best heuristic move available to the
    side to move there, negated when that side is not the root player. This
    is an approximation of the opponent's best reply, not a negamax value.
    """

    def __init__(
        self,
        heuristic: Heuristic,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.heuristic = heuristic
        self.config = config or SearchConfig()
        self.rng = rng or np.random.default_rng()
        self._nodes = 0

    # ------------------------------------------------------------------
    def run(self, state: GameState) -> SearchResult:
        """Pick an action for the side to move.

        ``state`` must not be terminal; a ``ValueError`` is raised otherwise.
        """
        root_actions = self._ordered_actions(state)
        if not root_actions:
            raise ValueError("Cannot search from a terminal state.")

        self._nodes = 1
        maximizing_player = state.current_player
        alpha = -math.inf
        beta = math.inf

        best_score = -math.inf
        best_action = root_actions[0]
        for candidate in root_actions:
            score = self._minimize(state.apply(candidate), 1, alpha, beta, maximizing_player)
            if score > best_score or (score == best_score and self._coin_flip()):
                best_score = score
                best_action = candidate
            if self.config.prune:
                alpha = max(alpha, best_score)
                if alpha >= beta:
                    break

        logger.debug(
            "player %d chose %s (score=%s, nodes=%d, depth=%d)",
            int(maximizing_player),
            best_action,
            best_score,
            self._nodes,
            self.config.max_depth,
        )
        return SearchResult(action=best_action, score=best_score, nodes=self._nodes)

    def choose(self, state: GameState) -> Action:
        return self.run(state).action

    # ------------------------------------------------------------------
    def _maximize(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        maximizing_player: Player,
    ) -> float:
        self._nodes += 1
        winner = state.winner_if_terminal()
        if winner != 0:
            return self._terminal_utility(winner, maximizing_player)
        if depth >= self.config.max_depth:
            return self._evaluate_leaf(state, maximizing_player)

        best = -math.inf
        for action in self._ordered_actions(state):
            score = self._minimize(state.apply(action), depth + 1, alpha, beta, maximizing_player)
            if score > best:
                best = score
            if self.config.prune:
                alpha = max(alpha, best)
                if alpha >= beta:
                    break
        return best

    def _minimize(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        maximizing_player: Player,
    ) -> float:
        self._nodes += 1
        winner = state.winner_if_terminal()
        if winner != 0:
            return self._terminal_utility(winner, maximizing_player)
        if depth >= self.config.max_depth:
            return self._evaluate_leaf(state, maximizing_player)

        best = math.inf
        for action in self._ordered_actions(state):
            score = self._maximize(state.apply(action), depth + 1, alpha, beta, maximizing_player)
            if score < best:
                best = score
            if self.config.prune:
                beta = min(beta, best)
                if alpha >= beta:
                    break
        return best

    def _evaluate_leaf(self, state: GameState, maximizing_player: Player) -> float:
        actions = state.legal_actions()
        if not actions:
            return self._terminal_utility(state.winner_if_terminal(), maximizing_player)
        to_move = state.current_player
        best = max(self.heuristic.evaluate(state, action, to_move) for action in actions)
        return float(best if to_move == maximizing_player else -best)

    @staticmethod
    def _terminal_utility(winner: int, maximizing_player: Player) -> float:
        return WIN_UTILITY if winner == int(maximizing_player) else -WIN_UTILITY

    def _ordered_actions(self, state: GameState) -> List[Action]:
        actions = state.legal_actions()
        if self.config.randomize_order:
            order = self.rng.permutation(len(actions))
            actions = [actions[i] for i in order]
        return actions

    def _coin_flip(self) -> bool:
        return self.config.random_tie_break and bool(self.rng.random() < 0.5)

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from isola.agents import Agent
from isola.core import Action, GameState, Player

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    winner: int
    plies: int
    player_one_moves: int
    player_two_moves: int
    final_state: GameState
    actions: List[Action] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        return self.winner == 0


@dataclass
class EvaluationResult:
    games_played: int = 0
    player_one_wins: int = 0
    player_two_wins: int = 0
    total_plies: int = 0
    total_player_one_moves: int = 0
    total_player_two_moves: int = 0

    def winrate_player_one(self) -> float:
        return self.player_one_wins / max(1, self.games_played)

    def winrate_player_two(self) -> float:
        return self.player_two_wins / max(1, self.games_played)

    def average_length(self) -> float:
        return self.total_plies / max(1, self.games_played)

    def average_player_one_moves(self) -> float:
        return self.total_player_one_moves / max(1, self.games_played)

    def average_player_two_moves(self) -> float:
        return self.total_player_two_moves / max(1, self.games_played)

    def record(self, game: GameRecord) -> None:
        self.games_played += 1
        if game.winner == Player.ONE:
            self.player_one_wins += 1
        elif game.winner == Player.TWO:
            self.player_two_wins += 1
        self.total_plies += game.plies
        self.total_player_one_moves += game.player_one_moves
        self.total_player_two_moves += game.player_two_moves

    def combine(self, other: "EvaluationResult") -> "EvaluationResult":
        return EvaluationResult(
            games_played=self.games_played + other.games_played,
            player_one_wins=self.player_one_wins + other.player_one_wins,
            player_two_wins=self.player_two_wins + other.player_two_wins,
            total_plies=self.total_plies + other.total_plies,
            total_player_one_moves=self.total_player_one_moves + other.total_player_one_moves,
            total_player_two_moves=self.total_player_two_moves + other.total_player_two_moves,
        )


def play_game(
    agent_one: Agent,
    agent_two: Agent,
    *,
    state: Optional[GameState] = None,
    randomize_first_player: bool = False,
    rng: Optional[np.random.Generator] = None,
    max_plies: Optional[int] = None,
) -> GameRecord:
    """Play one game; ``agent_one`` always controls player one's token."""
    if state is None:
        state = GameState.initial(randomize_first_player, rng=rng)

    actions: List[Action] = []
    moves = {Player.ONE: 0, Player.TWO: 0}
    winner = state.winner_if_terminal()
    while winner == 0:
        if max_plies is not None and len(actions) >= max_plies:
            break
        to_move = state.current_player
        agent = agent_one if to_move == Player.ONE else agent_two
        action = agent.choose(state)
        state = state.apply(action)
        actions.append(action)
        moves[to_move] += 1
        winner = state.winner_if_terminal()

    logger.debug(
        "%s vs %s: winner=%d after %d plies",
        agent_one.name(),
        agent_two.name(),
        winner,
        len(actions),
    )
    return GameRecord(
        winner=winner,
        plies=len(actions),
        player_one_moves=moves[Player.ONE],
        player_two_moves=moves[Player.TWO],
        final_state=state,
        actions=actions,
    )


def evaluate_agents(
    agent_one: Agent,
    agent_two: Agent,
    *,
    games: int,
    randomize_first_player: bool = True,
    seed: Optional[int] = None,
    max_plies: Optional[int] = None,
) -> EvaluationResult:
    rng = np.random.default_rng(seed)
    result = EvaluationResult()
    for _ in range(games):
        game = play_game(
            agent_one,
            agent_two,
            randomize_first_player=randomize_first_player,
            rng=rng,
            max_plies=max_plies,
        )
        result.record(game)
    return result

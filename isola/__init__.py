"""Isola game engine and adversarial search agents."""

from . import agents, core, env, evaluation, features, heuristics, search
from .core import Action, Coordinate, GameState, Player
from .env import IsolaEnv
from .features import BOARD_CHANNELS, build_board_tensor
from .heuristics import Heuristic, MobilityHeuristic, TightCellHeuristic
from .search import AlphaBetaSearch, SearchConfig, SearchResult
from .agents import (
    Agent,
    AgentConfig,
    MinimaxAgent,
    RandomAgent,
    agent_from_config,
    heuristic_one,
    heuristic_two,
    load_agent_config,
    make_minimax_agent,
    make_random_agent,
)
from .evaluation import EvaluationResult, GameRecord, evaluate_agents, play_game

__all__ = [
    "agents",
    "core",
    "env",
    "evaluation",
    "features",
    "heuristics",
    "search",
    "Action",
    "Coordinate",
    "GameState",
    "Player",
    "IsolaEnv",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "Heuristic",
    "MobilityHeuristic",
    "TightCellHeuristic",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "Agent",
    "AgentConfig",
    "MinimaxAgent",
    "RandomAgent",
    "agent_from_config",
    "heuristic_one",
    "heuristic_two",
    "load_agent_config",
    "make_minimax_agent",
    "make_random_agent",
    "EvaluationResult",
    "GameRecord",
    "evaluate_agents",
    "play_game",
]

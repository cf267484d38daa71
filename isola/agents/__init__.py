"""Agents that pick moves in an Isola game."""

from .base import Agent
from .random_agent import RandomAgent
from .minimax import MinimaxAgent
from .factory import (
    AgentConfig,
    agent_from_config,
    heuristic_one,
    heuristic_two,
    load_agent_config,
    make_minimax_agent,
    make_random_agent,
)

__all__ = [
    "Agent",
    "RandomAgent",
    "MinimaxAgent",
    "AgentConfig",
    "agent_from_config",
    "heuristic_one",
    "heuristic_two",
    "load_agent_config",
    "make_minimax_agent",
    "make_random_agent",
]

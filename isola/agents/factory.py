from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import numpy as np
import yaml

from isola.core import DEFAULT_SEARCH_DEPTH
from isola.heuristics import HEURISTICS, Heuristic, MobilityHeuristic, TightCellHeuristic, make_heuristic
from isola.search import SearchConfig

from .base import Agent
from .minimax import MinimaxAgent
from .random_agent import RandomAgent

AGENT_KINDS = ("random", "minimax")


@dataclass
class AgentConfig:
    kind: str = "minimax"
    heuristic: str = "mobility"
    depth: int = DEFAULT_SEARCH_DEPTH
    randomize_order: bool = True
    seed: Optional[int] = None


def make_random_agent(rng: Optional[np.random.Generator] = None) -> RandomAgent:
    return RandomAgent(rng)


def make_minimax_agent(
    heuristic: Heuristic,
    depth: int = DEFAULT_SEARCH_DEPTH,
    randomize_order: bool = True,
    *,
    rng: Optional[np.random.Generator] = None,
) -> MinimaxAgent:
    config = SearchConfig(max_depth=depth, randomize_order=randomize_order)
    return MinimaxAgent(heuristic, config=config, rng=rng)


def heuristic_one(rng: Optional[np.random.Generator] = None) -> MinimaxAgent:
    return make_minimax_agent(MobilityHeuristic(), DEFAULT_SEARCH_DEPTH, True, rng=rng)


def heuristic_two(rng: Optional[np.random.Generator] = None) -> MinimaxAgent:
    return make_minimax_agent(TightCellHeuristic(), DEFAULT_SEARCH_DEPTH, True, rng=rng)


def agent_from_config(config: AgentConfig) -> Agent:
    rng = np.random.default_rng(config.seed)
    if config.kind == "random":
        return make_random_agent(rng)
    if config.kind == "minimax":
        return make_minimax_agent(
            make_heuristic(config.heuristic),
            config.depth,
            config.randomize_order,
            rng=rng,
        )
    raise ValueError(f"Unknown agent kind '{config.kind}'. Expected one of {AGENT_KINDS}.")


def load_agent_config(path: Union[str, Path]) -> AgentConfig:
    path = Path(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Agent config {path} must be a mapping.")
    known = {f.name for f in fields(AgentConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown agent config keys: {sorted(unknown)}")
    config = AgentConfig(**raw)
    if config.kind not in AGENT_KINDS:
        raise ValueError(f"Unknown agent kind '{config.kind}'. Expected one of {AGENT_KINDS}.")
    if config.heuristic not in HEURISTICS:
        raise ValueError(f"Unknown heuristic '{config.heuristic}'. Expected one of {sorted(HEURISTICS)}.")
    return config

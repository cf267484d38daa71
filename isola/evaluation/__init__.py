"""Game driver and match series helpers."""

from .match import EvaluationResult, GameRecord, evaluate_agents, play_game

__all__ = ["EvaluationResult", "GameRecord", "evaluate_agents", "play_game"]

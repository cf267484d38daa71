"""Gymnasium environment wrapper."""

from .gym_env import IsolaEnv

__all__ = ["IsolaEnv"]

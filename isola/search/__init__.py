"""Adversarial search over Isola game trees."""

from .alphabeta import AlphaBetaSearch, SearchConfig, SearchResult

__all__ = ["AlphaBetaSearch", "SearchConfig", "SearchResult"]

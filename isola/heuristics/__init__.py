"""Heuristic evaluators used at the search frontier."""

from .base import Heuristic
from .evaluators import (
    HEURISTICS,
    MobilityHeuristic,
    TightCellHeuristic,
    count_tight_cells,
    make_heuristic,
)

__all__ = [
    "Heuristic",
    "HEURISTICS",
    "MobilityHeuristic",
    "TightCellHeuristic",
    "count_tight_cells",
    "make_heuristic",
]

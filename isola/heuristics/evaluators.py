from __future__ import annotations

from typing import Dict, Tuple, Type

from isola.core import COLS, ROWS, Action, Coordinate, GameState, Player

from .base import Heuristic

TRAPPED_BONUS = 100
SQUEEZE_BONUS = 2
TIGHT_CELL_THRESHOLD = 3


def _mobility_pair(state: GameState, next_state: GameState, player: Player) -> Tuple[int, int]:
    before = state.mobility(player)
    after = next_state.mobility(player)
    return before, after


def count_tight_cells(state: GameState) -> int:
    """Available cells with at least three removed king neighbours."""
    count = 0
    for row in range(ROWS):
        for col in range(COLS):
            if not state.is_cell_available(row, col):
                continue
            blocked = sum(
                1
                for cell in state.neighbors_of(Coordinate(row, col))
                if not state.is_cell_available(cell.row, cell.col)
            )
            if blocked >= TIGHT_CELL_THRESHOLD:
                count += 1
    return count


class MobilityHeuristic(Heuristic):
    """Sign of the mover's mobility change plus an opponent-pressure bonus."""

    name = "HeuristicOne"

    def evaluate(self, state: GameState, action: Action, player: Player) -> int:
        player = Player(int(player))
        next_state = state.apply(action)
        before, after = _mobility_pair(state, next_state, player)
        if after > before:
            move_score = 1
        elif after == before:
            move_score = 0
        else:
            move_score = -1

        opponent = player.opponent
        opponent_after = next_state.mobility(opponent)
        if opponent_after == 0:
            pressure = TRAPPED_BONUS
        elif opponent_after < state.mobility(opponent):
            pressure = SQUEEZE_BONUS
        else:
            pressure = 0
        return move_score + pressure


class TightCellHeuristic(Heuristic):
    """Mobility given up by the move plus the number of tight cells left behind."""

    name = "HeuristicTwo"

    def evaluate(self, state: GameState, action: Action, player: Player) -> int:
        player = Player(int(player))
        next_state = state.apply(action)
        before, after = _mobility_pair(state, next_state, player)
        move_score = before - after

        if next_state.mobility(player.opponent) == 0:
            pressure = TRAPPED_BONUS
        else:
            pressure = count_tight_cells(next_state)
        return move_score + pressure


HEURISTICS: Dict[str, Type[Heuristic]] = {
    "mobility": MobilityHeuristic,
    "tight_cells": TightCellHeuristic,
}


def make_heuristic(key: str) -> Heuristic:
    try:
        return HEURISTICS[key]()
    except KeyError:
        raise ValueError(f"Unknown heuristic '{key}'. Expected one of {sorted(HEURISTICS)}.") from None

from __future__ import annotations

from isola.core import Action, GameState, Player


class Heuristic:
    """Scores one candidate action from one state for one player."""

    name: str = "Heuristic"

    def evaluate(self, state: GameState, action: Action, player: Player) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

from __future__ import annotations

from typing import Optional

from isola.core import Action, GameState


class Agent:
    """Agent interface choosing one action for the side to move."""

    def choose(self, state: GameState) -> Action:
        raise NotImplementedError

    def name(self) -> str:
        return type(self).__name__

    def spawn(self, seed: Optional[int] = None) -> "Agent":
        """Return a copy of this agent with its own random generator."""
        return self

    def __repr__(self) -> str:
        return f"<{self.name()}>"

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoolArray = NDArray[np.bool_]

ROWS = 6
COLS = 8
CELLS = ROWS * COLS

# King-move deltas in N, NE, E, SE, S, SW, W, NW order.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self == Player.ONE else Player.ONE


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


PLAYER_ONE_START = Coordinate(0, 2)
PLAYER_TWO_START = Coordinate(5, 2)


@dataclass(frozen=True)
class Action:
    destination: Coordinate
    removal: Coordinate

    def __str__(self) -> str:
        return f"move {self.destination}, remove {self.removal}"


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def _check_bounds(row: int, col: int) -> None:
    if not in_bounds(row, col):
        raise IndexError(f"Cell ({row},{col}) is outside the {ROWS}x{COLS} board.")


def _frozen(grid: BoolArray) -> BoolArray:
    grid.setflags(write=False)
    return grid


@dataclass(frozen=True, eq=False)
class GameState:
    available: BoolArray  # shape (6, 8), dtype=bool, True while the cell is in play
    player_one_position: Coordinate
    player_two_position: Coordinate
    current_player: Player = Player.ONE
    _hash: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        grid = np.array(self.available, dtype=bool, copy=True)
        if grid.shape != (ROWS, COLS):
            raise ValueError(f"Availability grid must have shape ({ROWS}, {COLS}), got {grid.shape}.")
        object.__setattr__(self, "available", _frozen(grid))
        object.__setattr__(self, "current_player", Player(int(self.current_player)))

    @classmethod
    def initial(
        cls,
        randomize_first_player: bool = False,
        rng: Optional[np.random.Generator] = None,
    ) -> "GameState":
        """Return the opening position with every cell in play."""
        starting = Player.ONE
        if randomize_first_player:
            rng = rng or np.random.default_rng()
            starting = Player.ONE if rng.random() < 0.5 else Player.TWO
        return cls(
            available=np.ones((ROWS, COLS), dtype=bool),
            player_one_position=PLAYER_ONE_START,
            player_two_position=PLAYER_TWO_START,
            current_player=starting,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def position_of(self, player: Player) -> Coordinate:
        return self.player_one_position if Player(int(player)) == Player.ONE else self.player_two_position

    @property
    def active_position(self) -> Coordinate:
        return self.position_of(self.current_player)

    @property
    def opponent_position(self) -> Coordinate:
        return self.position_of(self.current_player.opponent)

    def is_cell_available(self, row: int, col: int) -> bool:
        _check_bounds(row, col)
        return bool(self.available[row, col])

    def is_cell_occupied(self, row: int, col: int) -> bool:
        _check_bounds(row, col)
        cell = (row, col)
        return cell == self.player_one_position.as_tuple() or cell == self.player_two_position.as_tuple()

    def available_count(self) -> int:
        return int(np.count_nonzero(self.available))

    def neighbors_of(self, pos: Coordinate) -> List[Coordinate]:
        """In-bounds king neighbours of ``pos``, ignoring availability and tokens."""
        result: List[Coordinate] = []
        for dr, dc in DIRECTIONS:
            row, col = pos.row + dr, pos.col + dc
            if in_bounds(row, col):
                result.append(Coordinate(row, col))
        return result

    def legal_destinations_from(self, pos: Coordinate) -> List[Coordinate]:
        return [
            cell
            for cell in self.neighbors_of(pos)
            if self.available[cell.row, cell.col] and not self.is_cell_occupied(cell.row, cell.col)
        ]

    def mobility(self, player: Player) -> int:
        return len(self.legal_destinations_from(self.position_of(player)))

    def legal_actions(self) -> List[Action]:
        """Every (destination, removal) pair open to the side to move.

        Removal candidates are judged against the board before the move: the
        cell being vacated may be removed, the opponent's cell may not.
        An empty list means the side to move is trapped and the state is
        terminal; the active token's own cell is always removable otherwise.
        """
        opponent = self.opponent_position
        removable = [
            Coordinate(int(row), int(col))
            for row, col in np.argwhere(self.available)
            if (int(row), int(col)) != opponent.as_tuple()
        ]
        actions: List[Action] = []
        for destination in self.legal_destinations_from(self.active_position):
            for cell in removable:
                if cell != destination:
                    actions.append(Action(destination, cell))
        return actions

    def winner_if_terminal(self) -> int:
        """Return 0 while the side to move can step, else the other player's id."""
        if self.legal_destinations_from(self.active_position):
            return 0
        return int(self.current_player.opponent)

    @property
    def is_terminal(self) -> bool:
        return self.winner_if_terminal() != 0

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def apply(self, action: Action) -> "GameState":
        """Return the successor state; the receiver is left untouched.

        Legality is the caller's responsibility: only actions taken from
        ``legal_actions()`` produce meaningful states.
        """
        _check_bounds(action.destination.row, action.destination.col)
        _check_bounds(action.removal.row, action.removal.col)
        grid = self.available.copy()
        grid[action.removal.row, action.removal.col] = False

        player_one, player_two = self.player_one_position, self.player_two_position
        if self.current_player == Player.ONE:
            player_one = action.destination
        else:
            player_two = action.destination
        return GameState(
            available=grid,
            player_one_position=player_one,
            player_two_position=player_two,
            current_player=self.current_player.opponent,
        )

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and self.player_one_position == other.player_one_position
            and self.player_two_position == other.player_two_position
            and np.array_equal(self.available, other.available)
        )

    def __hash__(self) -> int:
        if not self._hash:
            value = hash(
                (
                    self.available.tobytes(),
                    self.player_one_position,
                    self.player_two_position,
                    int(self.current_player),
                )
            )
            object.__setattr__(self, "_hash", value or 1)
        return self._hash

    def __repr__(self) -> str:
        return f"GameState(current={self.current_player.name})\n" + render_board(self)


def render_board(state: GameState) -> str:
    """ASCII board: `.` in play, `#` removed, `1`/`2` for the tokens."""
    tokens = {
        state.player_one_position.as_tuple(): "1",
        state.player_two_position.as_tuple(): "2",
    }
    rows = []
    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            if (row, col) in tokens:
                cells.append(tokens[(row, col)])
            else:
                cells.append("." if state.available[row, col] else "#")
        rows.append("".join(cells))
    return "\n".join(rows)

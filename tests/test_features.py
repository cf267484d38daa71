from isola.core import Action, Coordinate, GameState
from isola.features import BOARD_CHANNELS, build_board_tensor


def test_initial_board_tensor():
    board = build_board_tensor(GameState.initial())

    assert board.shape == (BOARD_CHANNELS, 6, 8)
    assert board[0].sum() == 48
    assert board[1, 0, 2] == 1.0
    assert board[2, 5, 2] == 1.0


def test_tensor_follows_side_to_move():
    state = GameState.initial().apply(Action(Coordinate(1, 2), Coordinate(3, 3)))
    board = build_board_tensor(state)

    assert board[0].sum() == 47
    assert board[0, 3, 3] == 0.0
    assert board[1, 5, 2] == 1.0
    assert board[2, 1, 2] == 1.0

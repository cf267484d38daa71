import numpy as np
import pytest

from isola import IsolaEnv
from isola.core import ACTION_VECTOR_SIZE, Action, Coordinate, GameState, Player, encode_action


def test_reset_returns_valid_observation():
    env = IsolaEnv()
    obs, info = env.reset()

    assert obs.shape == (3, 6, 8)
    assert info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)
    assert np.count_nonzero(info["legal_action_mask"]) == len(env.state.legal_actions())
    assert info["current_player"] == 1


def test_step_advances_state():
    env = IsolaEnv()
    env.reset()
    action = encode_action(Action(Coordinate(1, 2), Coordinate(0, 2)))

    obs, reward, terminated, truncated, info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert env.state.current_player == Player.TWO
    assert obs[0, 0, 2] == 0.0
    # Channel 2 holds the opponent of the side to move, i.e. player one.
    assert obs[2, 1, 2] == 1.0


def test_illegal_action_raises():
    env = IsolaEnv()
    env.reset()
    with pytest.raises(ValueError):
        env.step(encode_action(Action(Coordinate(3, 3), Coordinate(0, 0))))
    with pytest.raises(ValueError):
        env.step(ACTION_VECTOR_SIZE)


def test_trapping_move_terminates_with_reward():
    env = IsolaEnv()
    env.reset()
    grid = np.ones((6, 8), dtype=bool)
    grid[4, 6] = False
    grid[5, 6] = False
    env._state = GameState(grid, Coordinate(2, 3), Coordinate(5, 7), Player.ONE)

    _, reward, terminated, _, _ = env.step(encode_action(Action(Coordinate(2, 4), Coordinate(4, 7))))
    assert terminated
    assert reward == 1.0


def test_render_ansi():
    env = IsolaEnv(render_mode="ansi")
    env.reset()
    assert env.render().splitlines()[0] == "..1....."
    with pytest.raises(NotImplementedError):
        IsolaEnv().render()

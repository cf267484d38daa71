import numpy as np
import pytest

from isola.agents import (
    AgentConfig,
    MinimaxAgent,
    RandomAgent,
    agent_from_config,
    heuristic_one,
    heuristic_two,
    load_agent_config,
    make_minimax_agent,
    make_random_agent,
)
from isola.core import COLS, ROWS, Coordinate, GameState, Player
from isola.heuristics import MobilityHeuristic, TightCellHeuristic


def trapped_state() -> GameState:
    grid = np.ones((ROWS, COLS), dtype=bool)
    grid[0, 1] = False
    grid[1, 0] = False
    grid[1, 1] = False
    return GameState(grid, Coordinate(0, 0), Coordinate(5, 7), Player.ONE)


def test_random_agent_returns_legal_action():
    agent = RandomAgent(np.random.default_rng(0))
    state = GameState.initial()
    legal = state.legal_actions()
    for _ in range(10):
        assert agent.choose(state) in legal


def test_random_agent_seeded_reproducible():
    state = GameState.initial()
    first = [RandomAgent(np.random.default_rng(7)).choose(state) for _ in range(2)]
    assert first[0] == first[1]

    agent = make_random_agent().spawn(3)
    other = RandomAgent(np.random.default_rng(3))
    assert agent.choose(state) == other.choose(state)


def test_agents_reject_terminal_state():
    state = trapped_state()
    with pytest.raises(ValueError):
        RandomAgent().choose(state)
    with pytest.raises(ValueError):
        make_minimax_agent(MobilityHeuristic(), depth=1).choose(state)


def test_agent_names():
    assert RandomAgent().name() == "Random Agent"
    assert heuristic_one().name() == "Minimax(d=3, HeuristicOne)"
    assert heuristic_two().name() == "Minimax(d=3, HeuristicTwo)"
    assert make_minimax_agent(TightCellHeuristic(), depth=0).name() == "Minimax(d=1, HeuristicTwo)"


def test_factory_presets_bind_configuration():
    agent = heuristic_two(np.random.default_rng(0))
    assert isinstance(agent, MinimaxAgent)
    assert isinstance(agent.heuristic, TightCellHeuristic)
    assert agent.depth == 3
    assert agent.search.config.randomize_order


def test_spawn_keeps_configuration():
    agent = make_minimax_agent(MobilityHeuristic(), depth=2, randomize_order=False)
    clone = agent.spawn(1)
    assert clone is not agent
    assert clone.search.rng is not agent.search.rng
    assert clone.name() == agent.name()
    assert not clone.search.config.randomize_order


def test_minimax_agent_chooses_legal_action():
    grid = np.zeros((ROWS, COLS), dtype=bool)
    grid[0:2, 0:4] = True
    state = GameState(grid, Coordinate(0, 0), Coordinate(1, 3), Player.ONE)
    agent = make_minimax_agent(MobilityHeuristic(), depth=2, rng=np.random.default_rng(1))

    result = agent.analyse(state)
    assert result.action in state.legal_actions()
    assert result.nodes > 0


def test_agent_from_config():
    random_agent = agent_from_config(AgentConfig(kind="random", seed=1))
    assert isinstance(random_agent, RandomAgent)

    minimax = agent_from_config(AgentConfig(heuristic="tight_cells", depth=2, randomize_order=False))
    assert isinstance(minimax, MinimaxAgent)
    assert minimax.name() == "Minimax(d=2, HeuristicTwo)"

    with pytest.raises(ValueError):
        agent_from_config(AgentConfig(kind="oracle"))


def test_load_agent_config(tmp_path):
    path = tmp_path / "agent.yaml"
    path.write_text("kind: minimax\nheuristic: tight_cells\ndepth: 2\nseed: 11\n")
    config = load_agent_config(path)

    assert config == AgentConfig(kind="minimax", heuristic="tight_cells", depth=2, randomize_order=True, seed=11)


@pytest.mark.parametrize(
    "text",
    ["depth: 2\nwidth: 3\n", "kind: oracle\n", "heuristic: centre\n", "- random\n"],
)
def test_load_agent_config_rejects_bad_input(tmp_path, text):
    path = tmp_path / "agent.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_agent_config(path)


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "agent.yaml"
    path.write_text("")
    assert load_agent_config(path) == AgentConfig()

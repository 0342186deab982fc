"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from termsweeper import BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Small environment for fast episodes."""
    return MinesweeperEnv(BoardConfig(6, 5, 4), render_mode="ansi")


class TestEnvironment:
    """Test the Env interface."""

    def test_spaces(self, env: MinesweeperEnv) -> None:
        """Spaces follow board dimensions."""
        assert env.action_space.n == 30
        assert env.observation_space.shape == (5, 6)

    def test_reset_observation_all_hidden(self, env: MinesweeperEnv) -> None:
        """Fresh episode is fully hidden."""
        obs, info = env.reset(seed=3)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert info["game_state"] == "PLAYING"
        assert env.get_action_mask().sum() == 30

    def test_seed_reproduces_layout(self, env: MinesweeperEnv) -> None:
        """Same seed, same mines."""
        env.reset(seed=11)
        first = env.controller.board.mine_positions
        env.reset(seed=11)
        assert env.controller.board.mine_positions == first

    def test_action_maps_to_x_y(self, env: MinesweeperEnv) -> None:
        """Action index is y * width + x."""
        env.reset(seed=5)
        safe = next(
            (x, y) for x, y, v in env.controller.board.cells() if not v.is_mine
        )
        env.step(safe[1] * 6 + safe[0])
        assert env.controller.board.get_cell(*safe).is_revealed is True

    def test_repeat_action_penalized(self, env: MinesweeperEnv) -> None:
        """Revealing the same safe cell twice costs a little."""
        env.reset(seed=5)
        x, y = next(
            (x, y) for x, y, v in env.controller.board.cells() if 0 < v.adjacency < 9
        )
        _, first, _, _, _ = env.step(y * 6 + x)
        _, second, _, _, _ = env.step(y * 6 + x)
        assert first in (1.0, 10.0)
        assert second == -0.1

    def test_mine_terminates(self, env: MinesweeperEnv) -> None:
        """Stepping on a mine ends the episode with a penalty."""
        env.reset(seed=2)
        x, y = sorted(env.controller.board.mine_positions)[0]
        _, reward, terminated, truncated, info = env.step(y * 6 + x)
        assert reward == -10.0
        assert terminated is True
        assert truncated is False
        assert info["game_state"] == "LOST"

    def test_random_episode_finishes(self, env: MinesweeperEnv) -> None:
        """Masked random play always reaches a terminal state."""
        env.reset(seed=0)
        env.action_space.seed(0)
        terminated = False
        info = {}
        for _ in range(30):
            action = env.action_space.sample(mask=env.get_action_mask())
            _, _, terminated, _, info = env.step(action)
            if terminated:
                break
        assert terminated is True
        assert info["game_state"] in ("WON", "LOST")

    def test_render_ansi(self, env: MinesweeperEnv) -> None:
        """ANSI render returns the text grid."""
        env.reset(seed=1)
        assert env.render().splitlines()[0] == "  0 1 2 3 4 5"

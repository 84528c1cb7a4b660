"""
Gymnasium environment wrapper for Minesweeper.

Drives a game session through a standard step/reset interface so the
game can be played by scripts and rendered as text.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, DEFAULT_CONFIG
from .session import GameSession
from .view import observation, render_text


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i // width, i % width);
        the remaining actions toggle a flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action the game ignores
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.reseed(int(self.np_random.integers(2**32)))
        self.session.on_new_game()
        self._steps = 0

        return observation(self.session.game.board), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see the class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, row, col = self._decode_action(action)
        self._steps += 1

        reward = self._apply(flag, row, col)
        game = self.session.game

        if self.render_mode == "human":
            self.render()

        terminated = not game.is_playing
        return observation(game.board), reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split a flat action into (is_flag, row, col)."""
        flag, index = divmod(int(action), self.config.total_cells)
        row, col = divmod(index, self.config.width)
        return bool(flag), row, col

    def _apply(self, flag: bool, row: int, col: int) -> float:
        """Forward the action to the session and score the result."""
        before = self.session.game
        if flag:
            after = self.session.on_toggle_flag(row, col)
        else:
            after = self.session.on_reveal(row, col)

        if after is before:
            return -0.1
        if flag:
            return 0.0
        if after.is_won:
            return 10.0
        if after.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        game = self.session.game
        return {
            "steps": self._steps,
            "revealed": sum(
                1 for _, _, cell in game.board.cells() if cell.is_revealed
            ),
            "total_safe": self.config.total_cells - self.config.num_mines,
            "flags_remaining": game.flags_remaining,
            "game_state": game.state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.session.game)
        if self.render_mode == "human":
            print(render_text(self.session.game))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions the game would accept.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        game = self.session.game
        if not game.is_playing:
            return mask
        for row, col, cell in game.board.cells():
            if cell.is_revealed:
                continue
            action = row * self.config.width + col
            mask[action + self.config.total_cells] = True
            if not cell.is_flagged:
                mask[action] = True
        return mask

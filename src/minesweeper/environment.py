"""
Gymnasium environment wrapper for Minesweeper.

Exposes the board to programmatic players through the standard
reset/step interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameState
from .errors import MinesweeperError


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
        - 0-8 = revealed cell with adjacent mine count
        - 9 = disclosed mine after a loss

    Actions:
        Discrete action space of size 2 * rows * columns.
        Action i < rows * columns reveals cell (i // columns, i % columns);
        the upper half toggles a flag on cell i - rows * columns.

    Rewards:
        - +1 for winning the game
        - -1 for hitting a mine
        - 0 otherwise, including rejected actions
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

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode
        self._cell_count = self.config.total_cells

        # One observation value per cell
        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )

        # Reveal actions followed by flag actions
        self.action_space = spaces.Discrete(2 * self._cell_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**32))
        self.board = Board(self.config, random.Random(board_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, row, col = self._decode_action(int(action))
        self._steps += 1

        error = None
        try:
            if flag:
                self.board.toggle_flag(row, col)
            else:
                self.board.reveal(row, col)
        except MinesweeperError as exc:
            error = str(exc)

        reward = 0.0 if error is not None else self._calculate_reward()
        terminated = not self.board.is_active

        info = self._get_info()
        if error is not None:
            info["error"] = error

        if self.render_mode == "human":
            self.render()

        return self.board.get_observation(), reward, terminated, False, info

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        if not 0 <= action < self.action_space.n:
            raise ValueError(f"Action {action} is outside the action space")
        flag = action >= self._cell_count
        index = action % self._cell_count
        return flag, index // self.config.columns, index % self.config.columns

    def _calculate_reward(self) -> float:
        """Reward only the outcome of an accepted move."""
        if self.board.status == GameState.WON:
            return 1.0
        if self.board.status == GameState.LOST:
            return -1.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "flagged": self.board.flagged_count,
            "total_safe": self._cell_count - self.config.num_mines,
            "game_state": self.board.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.board.render_text()
        if self.render_mode == "human":
            print(self.board.render_text())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Flagged cells can be
            unflagged but not revealed.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.board.is_active:
            return mask
        for row, col in self.board.get_valid_actions():
            index = row * self.config.columns + col
            mask[index] = not self.board.get_cell(row, col).is_flagged
            mask[self._cell_count + index] = True
        return mask

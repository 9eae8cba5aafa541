"""
rules.py - Turn orchestration and Gymnasium environment for multiconnect

This module provides:
1. Game, which owns the board and the turn order and decides when a game ends
2. A gymnasium-compatible environment that drives a Game one drop at a time
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from multiconnect.debug import debug
from multiconnect.game.board import Board
from multiconnect.game.win import check_for_win, winning_line
from multiconnect.utils import (CONNECT_N, COLS, DEFAULT_COLORS, ROWS, EMPTY, GameStatus,
                                Player, RejectReason, color_to_rgb, make_roster)


@dataclass(frozen=True)
class Placed:
    """A drop that put a piece on the board."""
    row: int
    column: int
    player_id: int
    status: GameStatus


@dataclass(frozen=True)
class Rejected:
    """A drop that was refused; the game is unchanged."""
    reason: RejectReason


DropResult = Union[Placed, Rejected]

OBSERVATION_DTYPES = (np.int8, np.int16, np.int32, np.int64)


class Game:
    """
    A single N-player game.

    The board is only ever mutated through drop(), which applies gravity,
    checks for a win around the new piece, then for a tie, and finally
    passes the turn on.
    """

    def __init__(self, height: int, width: int, players: Sequence[Player],
                 connect_n: int = CONNECT_N):
        """
        Initialize a new game.

        Args:
            height: Number of board rows
            width: Number of board columns
            players: Turn order; players[0] moves first
            connect_n: Run length needed to win
        """
        debug.debug(f"Initializing Game {height}x{width} with {len(players)} players", "game")
        self._board = Board(height, width)
        self.players: Tuple[Player, ...] = tuple(players)
        self.connect_n = connect_n
        self.current_index = 0
        self._status = GameStatus.in_progress()
        self.last_move: Optional[Tuple[int, int]] = None

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def status(self) -> GameStatus:
        """Current status; only drop() changes it."""
        return self._status

    def current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.current_index]

    def drop(self, column: int) -> DropResult:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column index in [0, width)

        Returns:
            Placed with the landing cell and the new status, or Rejected if the
            game is over or the column is full
        """
        if self.status.is_game_over():
            debug.debug(f"Drop in column {column} rejected: game is over ({self.status})", "game")
            return Rejected(RejectReason.GAME_OVER)

        row = self._board.find_landing_row(column)
        if row is None:
            debug.debug(f"Drop in column {column} rejected: column is full", "game")
            return Rejected(RejectReason.COLUMN_FULL)

        player = self.current_player()
        debug.debug(f"{player} drops in column {column}", "game")
        self._board.place(row, column, player.number)
        self.last_move = (row, column)

        debug.start_timer("win_check")
        won = check_for_win(self._board, row, column, player.number, self.connect_n)
        debug.end_timer("win_check", "game")

        if won:
            self._status = GameStatus.won(player.number)
            debug.info(f"{player} won with a move at ({row}, {column})", "game")
        elif self._board.is_full():
            self._status = GameStatus.tied()
            debug.info("Game ends in a tie", "game")
        else:
            self.current_index = (self.current_index + 1) % len(self.players)

        return Placed(row, column, player.number, self.status)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def winner(self) -> Optional[Player]:
        """Get the winning player, or None if nobody has won."""
        if self.status.winner is None:
            return None
        return next(p for p in self.players if p.number == self.status.winner)

    def winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the winning run, or an empty list if the game was not won."""
        if self.status.winner is None or self.last_move is None:
            return []
        row, column = self.last_move
        return winning_line(self._board, row, column, self.status.winner, self.connect_n)

    def get_cell(self, row: int, column: int) -> Optional[int]:
        return self._board.get_cell(row, column)

    def get_state(self) -> np.ndarray:
        """Copy of the grid, 0 for empty cells."""
        return self._board.get_state()

    def valid_columns(self) -> List[int]:
        if self.is_game_over():
            return []
        return self._board.valid_columns()

    def status_message(self) -> str:
        """Human-readable status line for the presentation layer."""
        winner = self.winner()
        if winner is not None:
            return f"{winner} won!"
        if self.status.is_game_over():
            return "Tie!"
        return f"{self.current_player()}'s turn"

    def render(self) -> str:
        return self._board.render(self.winning_line())


def create_game(height: int, width: int, players: Sequence[Player]) -> Game:
    """Start a game on an empty height x width board with the given turn order."""
    return Game(height, width, players)


class MultiConnectEnv(gym.Env):
    """
    Gymnasium environment wrapping a Game.

    Each step drops a piece for whichever player's turn it is, so a single
    driver can play every seat.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    CELL_PIXELS = 50
    EMPTY_RGB = (0, 0, 0)
    BOARD_RGB = (0, 0, 128)

    def __init__(self, height: int = ROWS, width: int = COLS,
                 players: Optional[Sequence[Player]] = None,
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            height: Number of board rows
            width: Number of board columns
            players: Turn order (defaults to two players with default colors)
            render_mode: One of metadata['render_modes'], or None
        """
        debug.debug("Initializing MultiConnectEnv", "env")

        self.height = height
        self.width = width
        self.players = tuple(players) if players else tuple(make_roster(DEFAULT_COLORS[:2]))
        self.render_mode = render_mode

        self.palette = self._build_palette()

        # Observations hold raw player ids, so the bound is the largest id
        high = max(player.number for player in self.players)
        self.observation_dtype = next(dtype for dtype in OBSERVATION_DTYPES
                                      if np.iinfo(dtype).max >= high)
        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=high, shape=(height, width), dtype=self.observation_dtype
        )

        self.game = create_game(height, width, self.players)

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """Start a fresh game with the same roster."""
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.game = create_game(self.height, self.width, self.players)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece in the given column for the current player.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info); the
            reward is from the point of view of the player who moved
        """
        action = int(action)
        debug.debug(f"Environment step with action {action}", "env")

        result = self.game.drop(action)
        if isinstance(result, Rejected):
            debug.warning(f"Rejected action {action}: {result.reason.name}", "env")
            info = self._get_info()
            info['rejected'] = result.reason
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.status.winner is not None:
            reward = self.reward_win
            terminated = True
        elif result.status.is_game_over():
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.game.render()

        if self.render_mode == "human":
            print(self.game.render())
            print(self.game.status_message())
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb()

        raise ValueError(f"Unsupported render mode: {self.render_mode}")

    def _render_rgb(self) -> np.ndarray:
        """Draw the board as a blue frame with a disc per cell in its player's color."""
        size = self.CELL_PIXELS
        frame = np.zeros((self.height * size, self.width * size, 3), dtype=np.uint8)
        frame[:, :] = self.BOARD_RGB

        yy, xx = np.mgrid[0:size, 0:size]
        center = size // 2
        disc = (xx - center) ** 2 + (yy - center) ** 2 <= (size * 2 // 5) ** 2

        grid = self.game.get_state()
        for row in range(self.height):
            for col in range(self.width):
                tile = frame[row * size:(row + 1) * size, col * size:(col + 1) * size]
                tile[disc] = self.palette[int(grid[row, col])]

        return frame

    def _build_palette(self) -> Dict[int, Tuple[int, int, int]]:
        """
        Map each player id to an RGB color for rgb_array frames.

        A seat whose color cannot be parsed is drawn in the default color for
        that seat instead.
        """
        palette = {EMPTY: self.EMPTY_RGB}
        for index, player in enumerate(self.players):
            try:
                palette[player.number] = color_to_rgb(player.color)
            except ValueError:
                fallback = DEFAULT_COLORS[index % len(DEFAULT_COLORS)]
                debug.warning(f"{player} color {player.color!r} cannot be drawn, using {fallback}", "env")
                palette[player.number] = color_to_rgb(fallback)
        return palette

    def _get_observation(self) -> np.ndarray:
        return self.game.get_state().astype(self.observation_dtype)

    def _get_info(self) -> Dict[str, Any]:
        valid_columns = self.game.valid_columns()
        return {
            'valid_moves': valid_columns,
            'num_valid_moves': len(valid_columns),
            'current_player': self.game.current_player().number,
            'status': str(self.game.status),
            'winning_line': self.game.winning_line(),
            'last_move': self.game.last_move,
        }

"""
utils.py - Constants, enumerations, and helpers shared across multiconnect

This module holds the default board dimensions, the player and status types
passed between the engine and its presentation layer, color helpers used when
building a roster, and the ASCII board renderer.
"""

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pygame

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

EMPTY = 0  # Grid value of an unoccupied cell

DEFAULT_COLORS = ["#FF0000", "#FFFF00", "#00A0FF", "#00C000", "#FF8000", "#A040FF"]

HEX_DIGITS = "0123456789ABCDEF"


class ContractViolation(ValueError):
    """Raised when a caller breaks the board's preconditions (bad coordinates, occupied cell)."""


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class RejectReason(Enum):
    """Why a drop request was refused without changing the game."""
    COLUMN_FULL = auto()
    GAME_OVER = auto()


class Direction(Enum):
    """The four axes along which a run can be completed."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right
    DIAGONAL_UP = auto()  # Bottom-left to top-right


@dataclass(frozen=True)
class Player:
    """A participant: 1-based turn-order number plus a display color."""
    number: int
    color: str

    def __str__(self):
        return f"Player {self.number}"


@dataclass(frozen=True)
class GameStatus:
    """Current game status: in progress, won by a player id, or tied."""
    result: GameResult
    winner: Optional[int] = None

    @classmethod
    def in_progress(cls) -> 'GameStatus':
        return cls(GameResult.IN_PROGRESS)

    @classmethod
    def won(cls, player_id: int) -> 'GameStatus':
        return cls(GameResult.WON, player_id)

    @classmethod
    def tied(cls) -> 'GameStatus':
        return cls(GameResult.TIED)

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def __str__(self):
        if self.result == GameResult.WON:
            return f"Won({self.winner})"
        if self.result == GameResult.TIED:
            return "Tied"
        return "InProgress"


def random_color(rng: Optional[random.Random] = None) -> str:
    """
    Generate a random color string of the form #RRGGBB.

    Args:
        rng: Optional random generator for reproducible colors

    Returns:
        Hex color string
    """
    rng = rng or random
    return "#" + "".join(HEX_DIGITS[rng.randrange(16)] for _ in range(6))


def make_roster(colors: Sequence[str]) -> List[Player]:
    """
    Build the turn order from a list of colors, numbering players from 1.

    Args:
        colors: One display color per player, in turn order

    Returns:
        List of players
    """
    return [Player(number=index + 1, color=color) for index, color in enumerate(colors)]


def color_to_rgb(color: str) -> Tuple[int, int, int]:
    """
    Parse a display color into an (r, g, b) tuple.

    Accepts anything pygame.Color understands: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB"
    and named colors such as "red" or "steelblue".

    Raises:
        ValueError: if the color cannot be parsed
    """
    try:
        parsed = pygame.Color(color.strip())
    except ValueError:
        raise ValueError(f"Unsupported color: {color!r}") from None
    return parsed.r, parsed.g, parsed.b


def is_drawable_color(color: str) -> bool:
    """Check whether color_to_rgb can parse a color."""
    try:
        color_to_rgb(color)
    except ValueError:
        return False
    return True


def piece_symbol(value: int) -> str:
    """Single-character symbol for a grid value ('.' for empty, 1-9 then A-Z)."""
    if value == EMPTY:
        return "."
    if value < 10:
        return str(value)
    return chr(ord("A") + value - 10) if value < 36 else "#"


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows
        width: Number of columns

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def render_board_ascii(grid: np.ndarray,
                       highlight: Optional[Sequence[Tuple[int, int]]] = None) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The game grid
        highlight: Optional cells to mark with '*' (e.g. a winning line)

    Returns:
        ASCII representation of the board
    """
    height, width = grid.shape
    marked = set(highlight or [])
    border = "|" + "-" * (width * 2 - 1) + "|"

    result = [border]
    for row in range(height):
        cells = []
        for col in range(width):
            symbol = piece_symbol(int(grid[row, col]))
            cells.append("*" if (row, col) in marked else symbol)
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap past 9 so the labels stay one character wide
    result.append("|" + " ".join(str(i % 10) for i in range(width)) + "|")

    return "\n".join(result)

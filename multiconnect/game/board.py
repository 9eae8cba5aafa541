"""
board.py - Board representation and the drop rule

The Board stores the grid of cells and knows where a dropped piece lands.
It does not know about turns or winners; the Game in rules.py drives it.
"""

import numpy as np
from typing import List, Optional

from multiconnect.debug import debug
from multiconnect.utils import (ROWS, COLS, EMPTY, ContractViolation,
                                is_valid_position, render_board_ascii)


class Board:
    """
    A fixed-size grid of cells, row 0 at the top.

    Cells hold 0 when empty, otherwise the id of the player occupying them.
    Once a cell is occupied it is never changed.
    """

    def __init__(self, height: int = ROWS, width: int = COLS):
        """
        Initialize an empty board.

        Args:
            height: Number of rows
            width: Number of columns
        """
        if height <= 0 or width <= 0:
            raise ContractViolation(f"Board dimensions must be positive, got {height}x{width}")

        debug.debug(f"Initializing {height}x{width} Board", "board")
        self.height = height
        self.width = width
        self.grid = np.zeros((height, width), dtype=int)
        self.piece_count = 0

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.width:
            raise ContractViolation(f"Column {column} out of range 0..{self.width - 1}")

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped in this column would land in.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full
        """
        self._check_column(column)

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row
        return None

    def place(self, row: int, column: int, player_id: int) -> None:
        """
        Occupy a cell with a player's piece.

        Raises:
            ContractViolation: if the cell is out of bounds or already occupied,
                or the player id is not positive
        """
        if not is_valid_position(row, column, self.height, self.width):
            raise ContractViolation(f"Position ({row}, {column}) is off the board")
        if player_id <= 0:
            raise ContractViolation(f"Player id must be positive, got {player_id}")
        if self.grid[row, column] != EMPTY:
            raise ContractViolation(
                f"Cell ({row}, {column}) already holds player {self.grid[row, column]}")

        debug.trace(f"Placing piece for player {player_id} at ({row}, {column})", "board")
        self.grid[row, column] = player_id
        self.piece_count += 1

    def is_full(self) -> bool:
        """Check whether every cell is occupied."""
        return self.piece_count == self.height * self.width

    def get_cell(self, row: int, column: int) -> Optional[int]:
        """Return the player id in a cell, or None if it is empty."""
        if not is_valid_position(row, column, self.height, self.width):
            raise ContractViolation(f"Position ({row}, {column}) is off the board")
        value = int(self.grid[row, column])
        return None if value == EMPTY else value

    def valid_columns(self) -> List[int]:
        """Columns that can still take a piece."""
        return [col for col in range(self.width) if self.grid[0, col] == EMPTY]

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array, 0 for empty cells
        """
        return self.grid.copy()

    def render(self, highlight=None) -> str:
        """Render the board as a string, optionally marking some cells."""
        return render_board_ascii(self.grid, highlight)

    def __str__(self) -> str:
        return self.render()

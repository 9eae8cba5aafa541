"""
win.py - Win detection around the most recently placed piece

Builds the four axis sequences (column, row and both diagonals) that pass
through a cell and scans each one for a run of the placing player's pieces.
"""

from typing import Dict, List, Tuple

from multiconnect.debug import debug
from multiconnect.game.board import Board
from multiconnect.utils import CONNECT_N, Direction

Coord = Tuple[int, int]


def axis_coordinates(board: Board, row: int, column: int) -> Dict[Direction, List[Coord]]:
    """
    Coordinates of the four full-board axes through a cell.

    Args:
        board: The board
        row: Row of the cell
        column: Column of the cell

    Returns:
        Mapping of direction to the ordered cells along that axis
    """
    axes = {
        Direction.VERTICAL: [(r, column) for r in range(board.height)],
        Direction.HORIZONTAL: [(row, c) for c in range(board.width)],
    }

    # Top-left to bottom-right: back up to the top/left edge, then walk down-right
    r, c = row, column
    while r > 0 and c > 0:
        r -= 1
        c -= 1
    diagonal = []
    while r < board.height and c < board.width:
        diagonal.append((r, c))
        r += 1
        c += 1
    axes[Direction.DIAGONAL_DOWN] = diagonal

    # Bottom-left to top-right: back up to the left/bottom edge, then walk up-right
    r, c = row, column
    while c > 0 and r < board.height - 1:
        c -= 1
        r += 1
    anti_diagonal = []
    while c < board.width and r >= 0:
        anti_diagonal.append((r, c))
        c += 1
        r -= 1
    axes[Direction.DIAGONAL_UP] = anti_diagonal

    return axes


def find_axes(board: Board, row: int, column: int) -> List[List[int]]:
    """Cell values along the column, row, diagonal and anti-diagonal through a cell."""
    return [[int(board.grid[r, c]) for r, c in coords]
            for coords in axis_coordinates(board, row, column).values()]


def check_for_win(board: Board, row: int, column: int, player_id: int,
                  connect_n: int = CONNECT_N) -> bool:
    """
    Check whether the piece at (row, column) completes a run for player_id.

    Each axis is scanned with a counter that grows on the player's pieces and
    resets on anything else; reaching connect_n wins immediately.
    """
    for axis in find_axes(board, row, column):
        counter = 0
        for value in axis:
            counter = counter + 1 if value == player_id else 0
            if counter == connect_n:
                debug.trace(f"Run of {connect_n} for player {player_id} through ({row}, {column})", "win")
                return True
    return False


def winning_line(board: Board, row: int, column: int, player_id: int,
                 connect_n: int = CONNECT_N) -> List[Coord]:
    """
    Get the cells of the winning run through (row, column).

    Returns:
        The full run containing the cell on the first axis where it reaches
        connect_n, or an empty list if there is none
    """
    for coords in axis_coordinates(board, row, column).values():
        index = coords.index((row, column))
        start = end = index
        while start > 0 and board.grid[coords[start - 1]] == player_id:
            start -= 1
        while end + 1 < len(coords) and board.grid[coords[end + 1]] == player_id:
            end += 1
        if board.grid[row, column] == player_id and end - start + 1 >= connect_n:
            return coords[start:end + 1]
    return []

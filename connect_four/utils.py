"""
utils.py - Constants, enumerations and win detection for the Connect Four engine

This module provides the constants and enumerations shared by the board, the
game engine and the presentation adapters, along with the pure functions that
search a grid for four-in-a-row.
"""

from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
MIN_DIMENSION = 4  # smallest side that can hold four in a row
CONNECT_N = 4  # Number of pieces in a row to win

MIN_PLAYERS = 2
MAX_PLAYERS = 4
DEFAULT_COLORS = ("red", "blue", "green", "orange")

EMPTY = 0  # grid value of an unoccupied cell

Coord = Tuple[int, int]  # (row, col)


class GameStatus(Enum):
    """Lifecycle of a game session."""
    SETUP = auto()
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the status is terminal."""
        return self in (GameStatus.WON, GameStatus.TIED)


class Direction(Enum):
    """Directions a run of four can extend in, starting from its first cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); row grows downwards. Order matters: it is the
# order runs are tried from each starting cell.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def run_from(row: int, col: int, direction: Direction) -> List[Coord]:
    """Coordinates of the CONNECT_N cells starting at (row, col) along direction."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]


def is_winning_run(grid: np.ndarray, cells: List[Coord], player_value: int) -> bool:
    """
    Check that every cell of a run is on the board and held by player_value.

    Args:
        grid: The game grid
        cells: Coordinates making up the run
        player_value: Identifier every cell must hold

    Returns:
        True if the run is a win for player_value
    """
    height, width = grid.shape
    return all(
        is_valid_position(r, c, height, width) and grid[r, c] == player_value
        for r, c in cells
    )


def iter_runs(height: int, width: int) -> Iterator[List[Coord]]:
    """Yield every candidate run, cell by cell in row-major order."""
    for row in range(height):
        for col in range(width):
            for direction in DIRECTION_VECTORS:
                yield run_from(row, col, direction)


def find_winning_run(grid: np.ndarray, player_value: int) -> Optional[List[Coord]]:
    """
    Scan the whole grid for a run of four belonging to player_value.

    Every cell is treated as a possible start of a run, so the result does not
    depend on where the last piece went. The scan stops at the first winning
    run it finds.

    Args:
        grid: The game grid
        player_value: Identifier of the player who just moved

    Returns:
        The coordinates of the first winning run, or None
    """
    if player_value == EMPTY:
        return None

    height, width = grid.shape
    for cells in iter_runs(height, width):
        if is_winning_run(grid, cells, player_value):
            return cells
    return None


def check_win(grid: np.ndarray, player_value: int) -> bool:
    """Check if player_value has four in a row anywhere on the grid."""
    return find_winning_run(grid, player_value) is not None

"""
board.py - Board representation and gravity placement for Connect Four

This module implements the Board class, which owns the grid of cells and
resolves where a dropped piece comes to rest. It knows nothing about players
or turn order; the game engine decides who moves and what a move means.
"""

from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.errors import (BoardContractError, InvalidColumnError,
                                 InvalidDimensionsError, InvalidPositionError)
from connect_four.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, EMPTY, MIN_DIMENSION,
                                is_valid_position)


def validate_dimensions(height, width) -> None:
    """Raise InvalidDimensionsError unless both sides are integers >= MIN_DIMENSION."""
    for name, value in (("height", height), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidDimensionsError(f"Board {name} must be an integer, got {value!r}")
        if value < MIN_DIMENSION:
            raise InvalidDimensionsError(
                f"Board {name} must be at least {MIN_DIMENSION}, got {value}")


class Board:
    """
    Represents a Connect Four game board.

    The grid is addressed [row, col] with row 0 at the top and row height-1 at
    the bottom. Cells hold EMPTY or the identifier of the player occupying them.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Create an empty board.

        Args:
            height: Number of rows (at least 4)
            width: Number of columns (at least 4)

        Raises:
            InvalidDimensionsError: if either side is too small
        """
        validate_dimensions(height, width)
        debug.debug(f"Initializing new {height}x{width} Board", "board")
        self.height = int(height)
        self.width = int(width)
        self.grid = np.full((self.height, self.width), EMPTY, dtype=int)

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.height, self.width

    def _check_column(self, column) -> int:
        if isinstance(column, bool) or not isinstance(column, Integral):
            raise InvalidColumnError(f"Column must be an integer, got {column!r}")
        if not (0 <= column < self.width):
            raise InvalidColumnError(
                f"Column {column} out of range, expected 0 to {self.width - 1}")
        return int(column)

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into column would settle in.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row of the column, or None if the column is full

        Raises:
            InvalidColumnError: if column is outside the board
        """
        column = self._check_column(column)
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                debug.trace(f"Column {column} lands at row {row}", "board")
                return row

        debug.debug(f"Column {column} is full", "board")
        return None

    def place(self, row: int, column: int, player_id: int) -> None:
        """
        Write player_id into a cell.

        The cell must be the landing cell of its column, as returned by
        find_landing_row in the same turn.

        Raises:
            BoardContractError: if the cell is not where gravity would settle a piece
        """
        if player_id == EMPTY:
            raise BoardContractError("Cannot place an empty marker")
        if not is_valid_position(row, column, self.height, self.width):
            raise BoardContractError(f"Position ({row}, {column}) is off the board")
        if self.find_landing_row(column) != row:
            raise BoardContractError(
                f"Position ({row}, {column}) is not the landing cell of column {column}")

        self.grid[row, column] = player_id
        debug.trace(f"Placed {player_id} at ({row}, {column})", "board")

    def cell_at(self, row: int, column: int) -> int:
        """
        Get the occupant of a cell.

        Returns:
            EMPTY, or the identifier of the player in the cell

        Raises:
            InvalidPositionError: if the coordinates are outside the board
        """
        for value in (row, column):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidPositionError(f"Coordinates must be integers, got ({row!r}, {column!r})")
        if not is_valid_position(row, column, self.height, self.width):
            raise InvalidPositionError(
                f"Position ({row}, {column}) outside {self.height}x{self.width} board")
        return int(self.grid[row, column])

    def is_column_full(self, column: int) -> bool:
        column = self._check_column(column)
        return bool(self.grid[0, column] != EMPTY)

    def get_valid_columns(self) -> List[int]:
        """Columns that can still take a piece."""
        return [col for col in range(self.width) if self.grid[0, col] == EMPTY]

    def is_full(self) -> bool:
        """Check that every cell on the board is occupied."""
        return bool(np.all(self.grid != EMPTY))

    def count_empty(self) -> int:
        return int(np.count_nonzero(self.grid == EMPTY))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the grid, safe for the caller to modify
        """
        return self.grid.copy()

    def __repr__(self) -> str:
        return f"Board(height={self.height}, width={self.width}, empty={self.count_empty()})"

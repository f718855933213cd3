"""
Tests for the grid search that finds four in a row.
"""

import numpy as np
import pytest

from connect_four.utils import (Direction, check_win, find_winning_run,
                                is_winning_run, run_from)

ROWS, COLS = 6, 7


def empty_grid(rows=ROWS, cols=COLS):
    return np.zeros((rows, cols), dtype=int)


def test_horizontal_win():
    grid = empty_grid()
    grid[5, 2:6] = 1
    assert find_winning_run(grid, 1) == [(5, 2), (5, 3), (5, 4), (5, 5)]


def test_vertical_win():
    grid = empty_grid()
    grid[2:6, 3] = 2
    assert find_winning_run(grid, 2) == [(2, 3), (3, 3), (4, 3), (5, 3)]


def test_diagonal_down_right_win():
    grid = empty_grid()
    for i in range(4):
        grid[1 + i, 2 + i] = 1
    assert find_winning_run(grid, 1) == [(1, 2), (2, 3), (3, 4), (4, 5)]


def test_diagonal_down_left_win():
    grid = empty_grid()
    for i in range(4):
        grid[2 + i, 4 - i] = 3
    assert find_winning_run(grid, 3) == [(2, 4), (3, 3), (4, 2), (5, 1)]


@pytest.mark.parametrize("cells", [
    [(5, 0), (5, 1), (5, 2)],
    [(5, 0), (5, 1), (5, 3), (5, 4)],
    [(5, 6), (4, 6), (3, 6)],
    [(5, 0), (4, 1), (2, 3), (1, 4)],
])
def test_short_or_broken_runs_do_not_win(cells):
    grid = empty_grid()
    for r, c in cells:
        grid[r, c] = 1
    assert not check_win(grid, 1)


def test_only_the_given_player_is_checked():
    grid = empty_grid()
    grid[5, 0:4] = 2
    assert check_win(grid, 2)
    assert not check_win(grid, 1)


def test_mixed_colors_do_not_win():
    grid = empty_grid()
    grid[5, 0:4] = [1, 2, 1, 1]
    assert not check_win(grid, 1)
    assert not check_win(grid, 2)


def test_first_run_in_row_major_order_is_reported():
    grid = empty_grid()
    grid[5, 0:5] = 1
    grid[0:4, 6] = 1
    assert find_winning_run(grid, 1) == [(0, 6), (1, 6), (2, 6), (3, 6)]


def test_empty_cells_never_win():
    assert find_winning_run(empty_grid(), 0) is None


def test_runs_leaving_the_board_are_not_wins():
    grid = empty_grid(4, 4)
    cells = run_from(0, 2, Direction.HORIZONTAL)
    assert cells == [(0, 2), (0, 3), (0, 4), (0, 5)]
    grid[0, 2:4] = 1
    assert not is_winning_run(grid, cells, 1)


def test_down_left_run_steps_towards_column_zero():
    assert run_from(0, 3, Direction.DIAGONAL_DOWN_LEFT) == [(0, 3), (1, 2), (2, 1), (3, 0)]

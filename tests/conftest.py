"""
Shared pytest fixtures for the Connect Four tests.
"""

from typing import List, Sequence

import pytest

from connect_four.game.outcomes import MoveOutcome
from connect_four.game.rules import GameEngine

# 4x4 drop sequence that fills the board with no four-in-a-row for anyone
TIE_4X4 = [1, 0, 3, 2, 0, 1, 2, 3, 0, 1, 2, 3, 1, 0, 3, 2]

# 4x4 drop sequence whose last move fills the board and completes blue's
# vertical run in column 3
WIN_ON_LAST_CELL_4X4 = [0, 2, 0, 0, 0, 3, 1, 1, 1, 1, 2, 3, 2, 3, 2, 3]


def play(engine: GameEngine, columns: Sequence[int]) -> List[MoveOutcome]:
    """Drop into each column in turn and collect the outcomes."""
    return [engine.drop_piece(column) for column in columns]


@pytest.fixture
def engine() -> GameEngine:
    """A standard 6x7 game between red and blue."""
    return GameEngine().start(["red", "blue"])


@pytest.fixture
def small_engine() -> GameEngine:
    """A 4x4 game between red and blue."""
    return GameEngine(4, 4).start(["red", "blue"])

"""
outcomes.py - Players and move results exchanged with presentation adapters
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from connect_four.utils import Coord


@dataclass(frozen=True)
class Player:
    """A seat in the game: its grid identifier and its color token."""
    player_id: int
    color: str

    def __str__(self) -> str:
        return self.color


class OutcomeKind(Enum):
    """What happened when a piece was dropped."""
    COLUMN_FULL = auto()
    ACCEPTED = auto()
    WON = auto()
    TIED = auto()
    GAME_ALREADY_OVER = auto()

    def placed_piece(self) -> bool:
        """Check if this outcome put a piece on the board."""
        return self in (OutcomeKind.ACCEPTED, OutcomeKind.WON, OutcomeKind.TIED)


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of GameEngine.drop_piece.

    row, column and color describe the piece that was placed, and are None
    when nothing was placed. next_player_color is only set for ACCEPTED;
    winning_line only for WON.
    """
    kind: OutcomeKind
    row: Optional[int] = None
    column: Optional[int] = None
    color: Optional[str] = None
    next_player_color: Optional[str] = None
    winning_line: List[Coord] = field(default_factory=list)

    @classmethod
    def column_full(cls, column: int) -> "MoveOutcome":
        return cls(OutcomeKind.COLUMN_FULL, column=column)

    @classmethod
    def game_already_over(cls) -> "MoveOutcome":
        return cls(OutcomeKind.GAME_ALREADY_OVER)

    @property
    def is_game_over(self) -> bool:
        return self.kind in (OutcomeKind.WON, OutcomeKind.TIED, OutcomeKind.GAME_ALREADY_OVER)

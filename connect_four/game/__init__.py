"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation, the game engine and the
move outcomes the engine reports.
"""

from connect_four.game.board import Board
from connect_four.game.outcomes import MoveOutcome, OutcomeKind, Player
from connect_four.game.rules import GameEngine

__all__ = ['Board', 'GameEngine', 'MoveOutcome', 'OutcomeKind', 'Player']

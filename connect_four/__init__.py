"""
connect_four - Rules engine for Connect Four with two to four players

This package provides the board representation and the game-state machine
(turn rotation, gravity drops, win and tie detection), plus a terminal
interface that plays the engine from a shell.
"""

# Version number
__version__ = '0.1.0'

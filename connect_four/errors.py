"""
errors.py - Exceptions raised by the Connect Four engine

Every recoverable problem a presentation adapter can cause derives from
Connect4Error, so an adapter can catch the whole family in one place and
show the message to the user. BoardContractError is separate: it means the
engine itself misused the board.
"""


class Connect4Error(Exception):
    """Base class for recoverable engine errors."""


class InvalidDimensionsError(Connect4Error):
    """Board requested smaller than the minimum playable size."""


class InvalidPlayerSetupError(Connect4Error):
    """Player count outside the allowed range, or a blank/duplicate color."""


class InvalidColumnError(Connect4Error):
    """Column index outside the board."""


class InvalidPositionError(Connect4Error):
    """Cell coordinates outside the board."""


class GameNotStartedError(Connect4Error):
    """Move or query attempted before a game was started."""


class BoardContractError(RuntimeError):
    """A piece was placed somewhere gravity could not have put it."""

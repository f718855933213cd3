"""
rules.py - Game session management for Connect Four

This module provides the GameEngine, which runs a single game session for
two to four players: it validates the player setup, rotates turns, applies
drops to its Board and detects wins and ties. It holds no reference to any
rendering surface; presentation adapters call into it and render what it
returns.
"""

from typing import List, Optional, Sequence, Tuple

from connect_four.debug import debug
from connect_four.errors import GameNotStartedError, InvalidPlayerSetupError
from connect_four.game.board import Board, validate_dimensions
from connect_four.game.outcomes import MoveOutcome, OutcomeKind, Player
from connect_four.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, EMPTY, MAX_PLAYERS,
                                MIN_PLAYERS, Coord, GameStatus, find_winning_run)


def validate_colors(colors: Sequence[str]) -> List[str]:
    """
    Check a proposed player setup.

    Args:
        colors: Color tokens in turn order

    Returns:
        The colors as a list

    Raises:
        InvalidPlayerSetupError: on a wrong player count, or a blank,
            non-string or duplicate color
    """
    if isinstance(colors, str):
        raise InvalidPlayerSetupError("Colors must be a sequence of strings, not a single string")

    try:
        colors = list(colors)
    except TypeError:
        raise InvalidPlayerSetupError(f"Colors must be a sequence of strings, got {colors!r}") from None

    if not (MIN_PLAYERS <= len(colors) <= MAX_PLAYERS):
        raise InvalidPlayerSetupError(
            f"Need {MIN_PLAYERS} to {MAX_PLAYERS} players, got {len(colors)}")

    seen = set()
    for position, color in enumerate(colors, start=1):
        if not isinstance(color, str) or not color.strip():
            raise InvalidPlayerSetupError(f"Player {position} needs a color")
        key = color.strip()
        if key in seen:
            raise InvalidPlayerSetupError(f"Color {key!r} is used by more than one player")
        seen.add(key)

    return colors


class GameEngine:
    """
    Connect Four game session.

    A freshly built engine is in SETUP: it has no board and no players until
    start() is called. Each start() replaces the board and player list
    wholesale, so nothing carries over from a previous game.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Initialize an engine for boards of the given size.

        Raises:
            InvalidDimensionsError: if either side is smaller than 4
        """
        validate_dimensions(height, width)
        self.height = int(height)
        self.width = int(width)

        self._board: Optional[Board] = None
        self._players: Tuple[Player, ...] = ()
        self._current_index = 0
        self._status = GameStatus.SETUP
        self._winner: Optional[Player] = None
        self._winning_line: List[Coord] = []

    def start(self, colors: Sequence[str]) -> "GameEngine":
        """
        Start a new game.

        Args:
            colors: Two to four distinct, non-blank color tokens; the first
                color moves first and turns follow this order

        Returns:
            The engine itself, now IN_PROGRESS

        Raises:
            InvalidPlayerSetupError: if the setup is rejected; the engine
                keeps whatever game it had before
        """
        try:
            colors = validate_colors(colors)
        except InvalidPlayerSetupError as e:
            debug.warning(f"Rejected player setup: {e}", "engine")
            raise

        self._board = Board(self.height, self.width)
        self._players = tuple(Player(player_id=i, color=color)
                              for i, color in enumerate(colors, start=1))
        self._current_index = 0
        self._status = GameStatus.IN_PROGRESS
        self._winner = None
        self._winning_line = []

        debug.info(f"New game: {', '.join(colors)} on a {self.height}x{self.width} board", "engine")
        return self

    def _require_started(self) -> Board:
        if self._board is None:
            raise GameNotStartedError("No game in progress; call start() first")
        return self._board

    def drop_piece(self, column: int) -> MoveOutcome:
        """
        Drop the current player's piece into a column.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            A MoveOutcome: COLUMN_FULL if nothing could be placed, WON or
            TIED if this move ended the game, ACCEPTED otherwise, and
            GAME_ALREADY_OVER if the game had already ended

        Raises:
            GameNotStartedError: if start() has not been called
            InvalidColumnError: if column is outside the board
        """
        board = self._require_started()

        if self._status.is_game_over():
            debug.debug(f"Ignoring drop in column {column}: game is over ({self._status.name})",
                        "engine")
            return MoveOutcome.game_already_over()

        row = board.find_landing_row(column)
        column = int(column)
        if row is None:
            return MoveOutcome.column_full(column)

        mover = self._players[self._current_index]
        board.place(row, column, mover.player_id)
        debug.debug(f"{mover.color} dropped into column {column}, landed on row {row}", "engine")

        debug.start_timer("win_check")
        winning_line = find_winning_run(board.grid, mover.player_id)
        debug.end_timer("win_check", "engine")

        # Win takes priority over a tie when the last empty cell completes a run
        if winning_line is not None:
            self._status = GameStatus.WON
            self._winner = mover
            self._winning_line = winning_line
            debug.info(f"Player {mover.color} wins with {winning_line}", "engine")
            return MoveOutcome(OutcomeKind.WON, row=row, column=column, color=mover.color,
                               winning_line=list(winning_line))

        if board.is_full():
            self._status = GameStatus.TIED
            debug.info("Game ends in a tie", "engine")
            return MoveOutcome(OutcomeKind.TIED, row=row, column=column, color=mover.color)

        self._current_index = (self._current_index + 1) % len(self._players)
        next_player = self._players[self._current_index]
        debug.debug(f"Switching to player {next_player.color}", "engine")
        return MoveOutcome(OutcomeKind.ACCEPTED, row=row, column=column, color=mover.color,
                           next_player_color=next_player.color)

    @property
    def status(self) -> GameStatus:
        return self._status

    def is_over(self) -> bool:
        """Check if the game has been won or tied."""
        return self._status.is_game_over()

    def dimensions(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def players(self) -> Tuple[Player, ...]:
        self._require_started()
        return self._players

    @property
    def current_index(self) -> int:
        self._require_started()
        return self._current_index

    def current_player(self) -> Player:
        """
        Get the player whose turn it is.

        Once the game is over this is the player who made the last move.
        """
        self._require_started()
        return self._players[self._current_index]

    def current_player_color(self) -> str:
        return self.current_player().color

    @property
    def winner(self) -> Optional[str]:
        """Color of the winning player, or None if nobody has won."""
        self._require_started()
        return self._winner.color if self._winner else None

    @property
    def winning_line(self) -> List[Coord]:
        self._require_started()
        return list(self._winning_line)

    def player_by_id(self, player_id: int) -> Optional[Player]:
        self._require_started()
        if player_id == EMPTY:
            return None
        return self._players[player_id - 1]

    def cell_at(self, row: int, column: int) -> Optional[str]:
        """
        Get the color occupying a cell.

        Returns:
            The occupant's color, or None if the cell is empty

        Raises:
            GameNotStartedError: if start() has not been called
            InvalidPositionError: if the coordinates are outside the board
        """
        board = self._require_started()
        player = self.player_by_id(board.cell_at(row, column))
        return player.color if player else None

    def get_valid_columns(self) -> List[int]:
        """Columns a piece can currently be dropped into; empty once the game is over."""
        board = self._require_started()
        if self.is_over():
            return []
        return board.get_valid_columns()

    def get_state(self):
        """Copy of the board grid holding player identifiers."""
        return self._require_started().get_state()

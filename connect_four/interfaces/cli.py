"""
cli.py - Command-line interface for playing Connect Four

This module is a presentation adapter for the GameEngine: it collects the
player setup, renders the board as text, reads column choices and reports
what each drop did. All rules live in the engine; this module only talks to
the user.
"""

import argparse
import sys
from typing import Dict, Iterable, List, Optional, Sequence

from connect_four.debug import DebugLevel, debug
from connect_four.errors import Connect4Error
from connect_four.game.outcomes import MoveOutcome, OutcomeKind
from connect_four.game.rules import GameEngine
from connect_four.utils import (DEFAULT_COLORS, DEFAULT_HEIGHT, DEFAULT_WIDTH,
                                MAX_PLAYERS, MIN_PLAYERS, Coord)

# Special commands returned by get_human_move
QUIT = -1
RESTART = -2

EMPTY_SYMBOL = "."
WIN_MARK = "*"


def player_symbols(colors: Sequence[str]) -> Dict[str, str]:
    """
    Pick a one-character board symbol for each color.

    Uses the capitalized initial of each color, falling back to seat numbers
    when two colors share an initial.
    """
    initials = [color.strip()[0].upper() for color in colors]
    if len(set(initials)) == len(initials) and {EMPTY_SYMBOL, WIN_MARK}.isdisjoint(initials):
        return dict(zip(colors, initials))
    return {color: str(seat) for seat, color in enumerate(colors, start=1)}


def render_board_ascii(engine: GameEngine, highlight: Iterable[Coord] = ()) -> str:
    """
    Render the engine's board as ASCII art.

    Args:
        engine: A started game engine
        highlight: Cells to mark, such as the winning line

    Returns:
        Multi-line text with 1-based column numbers underneath
    """
    height, width = engine.dimensions()
    symbols = player_symbols([p.color for p in engine.players])
    marked = set(highlight)

    lines = ["|" + "-" * (width * 2 - 1) + "|"]
    for row in range(height):
        cells = []
        for col in range(width):
            color = engine.cell_at(row, col)
            symbol = symbols[color] if color is not None else EMPTY_SYMBOL
            cells.append(WIN_MARK if (row, col) in marked else symbol)
        lines.append("|" + " ".join(cells) + "|")
    lines.append("|" + "-" * (width * 2 - 1) + "|")
    # Column numbers past 9 only show their last digit
    lines.append("|" + " ".join(str((col + 1) % 10) for col in range(width)) + "|")

    return "\n".join(lines)


def check_colors(colors: Sequence[str]) -> Optional[str]:
    """Return a message describing what is wrong with the colors, or None."""
    if not (MIN_PLAYERS <= len(colors) <= MAX_PLAYERS):
        return f"Please choose {MIN_PLAYERS} to {MAX_PLAYERS} players."
    if any(not color.strip() for color in colors):
        return "Please choose valid colors: every player needs a color."
    if len({color.strip() for color in colors}) != len(colors):
        return "Please choose valid colors: two players picked the same color."
    return None


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """Initialize the CLI with an engine for the requested board size."""
        self.engine = GameEngine(height, width)
        self.colors: List[str] = []

    def prompt_player_count(self) -> Optional[int]:
        """Ask how many players will play, defaulting to the minimum. None if input ran out."""
        while True:
            try:
                raw = input(f"Total players ({MIN_PLAYERS}-{MAX_PLAYERS}) [{MIN_PLAYERS}]: ").strip()
            except EOFError:
                return None
            if not raw:
                return MIN_PLAYERS
            try:
                count = int(raw)
            except ValueError:
                print("Please enter a number.")
                continue
            if MIN_PLAYERS <= count <= MAX_PLAYERS:
                return count
            print(f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}.")

    def prompt_colors(self, count: int) -> Optional[List[str]]:
        """Ask each player for a color until the choices are usable. None if input ran out."""
        while True:
            colors = []
            for seat in range(1, count + 1):
                default = DEFAULT_COLORS[seat - 1]
                try:
                    raw = input(f"Player {seat} Color [{default}]: ")
                except EOFError:
                    return None
                colors.append(raw.strip() or default)

            problem = check_colors(colors)
            if problem is None:
                return colors
            print(problem)

    def setup_players(self, colors: Optional[Sequence[str]] = None,
                      num_players: Optional[int] = None) -> Optional[List[str]]:
        """
        Settle the player colors, prompting for whatever was not given.

        Args:
            colors: Colors from the command line, used when valid
            num_players: Player count from the command line

        Returns:
            The colors, or None if input ran out while prompting
        """
        if colors:
            colors = [color.strip() for color in colors]
            problem = check_colors(colors)
            if problem is None:
                return colors
            print(problem)

        count = num_players if num_players else self.prompt_player_count()
        if count is None:
            return None
        return self.prompt_colors(count)

    def start_game(self, colors: Sequence[str]) -> bool:
        """Start a new session, reporting a rejected setup instead of raising."""
        try:
            self.engine.start(colors)
        except Connect4Error as e:
            print(f"Could not start game: {e}")
            return False

        self.colors = list(colors)
        print("Starting a new Connect Four game!")
        print(render_board_ascii(self.engine))
        return True

    def get_human_move(self) -> Optional[int]:
        """
        Get a move from the current player.

        Returns:
            Column index (0-based), QUIT or RESTART, or None if the input was invalid
        """
        _, width = self.engine.dimensions()
        color = self.engine.current_player_color()
        try:
            user_input = input(f"Player {color} move (columns 1-{width}, q/r): ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            column = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

        if not (1 <= column <= width):
            print(f"Column must be between 1 and {width}.")
            return None
        return column - 1

    def report_outcome(self, outcome: MoveOutcome) -> None:
        """Print the board and message matching a drop's outcome."""
        if outcome.kind == OutcomeKind.COLUMN_FULL:
            print(f"Column {outcome.column + 1} is full.")
        elif outcome.kind == OutcomeKind.ACCEPTED:
            print(render_board_ascii(self.engine))
            print(f"Player {outcome.next_player_color}'s turn.")
        elif outcome.kind == OutcomeKind.WON:
            print(render_board_ascii(self.engine, highlight=outcome.winning_line))
            print(f"Player {outcome.color} won!")
        elif outcome.kind == OutcomeKind.TIED:
            print(render_board_ascii(self.engine))
            print("Tie!")
        elif outcome.kind == OutcomeKind.GAME_ALREADY_OVER:
            print("The game is over. Press r to play again.")

    def play_game(self, colors: Sequence[str]) -> bool:
        """
        Play a game with the given players until it ends or the user quits.

        Returns:
            True if a game reached a win or tie, False if the user quit
        """
        if not self.start_game(colors):
            return False

        while not self.engine.is_over():
            move = self.get_human_move()

            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return False
            elif move == RESTART:
                debug.info("Restarting with the same players", "cli")
                self.start_game(self.colors)
                continue

            try:
                outcome = self.engine.drop_piece(move)
            except Connect4Error as e:
                print(f"Invalid move: {e}")
                continue
            self.report_outcome(outcome)

        print("Game over!")
        return True


def configure_debug(args: argparse.Namespace) -> None:
    """Configure logging from --debug, --debug_level and --log_file."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Connect Four with 2 to 4 players')

    board_group = parser.add_argument_group('Board options')
    board_group.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                             help=f'Number of rows (default: {DEFAULT_HEIGHT})')
    board_group.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                             help=f'Number of columns (default: {DEFAULT_WIDTH})')

    player_group = parser.add_argument_group('Player options')
    player_group.add_argument('--players', type=int, choices=range(MIN_PLAYERS, MAX_PLAYERS + 1),
                              help='Number of players (prompted if omitted)')
    player_group.add_argument('--colors', nargs='+', metavar='COLOR',
                              help='Player colors in turn order (prompted if omitted)')

    log_group = parser.add_argument_group('Logging options')
    log_group.add_argument('--debug', action='store_true', help='Enable debug logging')
    log_group.add_argument('--debug_level', default='warning',
                           choices=[level.name.lower() for level in DebugLevel],
                           help='Logging level (default: warning)')
    log_group.add_argument('--log_file', help='Also write log messages to this file')

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    configure_debug(args)

    try:
        cli = SimpleCLI(args.height, args.width)
    except Connect4Error as e:
        print(f"Error: {e}")
        return 2

    colors = cli.setup_players(args.colors, args.players)
    if colors is None:
        print("Quitting game.")
        return 0
    cli.play_game(colors)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
cli.py - Command-line interface for multiconnect

Hot-seat play for any number of players in the terminal, plus a benchmark
that plays random-column games to time drops and win checks.
"""

import argparse
import random
import sys
from typing import List, Optional

from multiconnect.debug import debug, DebugLevel
from multiconnect.game.board import Board
from multiconnect.game.rules import Game, Rejected, create_game
from multiconnect.game.win import check_for_win
from multiconnect.utils import (ROWS, COLS, DEFAULT_COLORS, RejectReason,
                                is_drawable_color, make_roster, random_color)

QUIT = -1


def drawable_color(value: str) -> str:
    """argparse type for --colors: only accept colors the renderer can draw."""
    if not is_drawable_color(value):
        raise argparse.ArgumentTypeError(f"cannot draw color {value!r}")
    return value


def build_colors(count: int, colors: Optional[List[str]] = None) -> List[str]:
    """
    Pick one color per player.

    Explicit colors come first, then the defaults, then random ones.
    """
    chosen = list(colors or [])[:count]
    for color in DEFAULT_COLORS:
        if len(chosen) >= count:
            break
        if color not in chosen:
            chosen.append(color)
    while len(chosen) < count:
        chosen.append(random_color())
    return chosen


class SimpleCLI:
    """Simple command-line interface for multiconnect."""

    def __init__(self):
        self.game: Optional[Game] = None
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four for N players')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a hot-seat game in the terminal')
        play_parser.add_argument('--players', type=int, default=2, help='Number of players')
        play_parser.add_argument('--height', type=int, default=ROWS, help='Board rows')
        play_parser.add_argument('--width', type=int, default=COLS, help='Board columns')
        play_parser.add_argument('--colors', nargs='*', type=drawable_color,
                                 help='Player colors in turn order (hex or CSS names)')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--players', type=int, default=2, help='Number of players')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the logging level."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            sys.exit(1)

    def _check_positive(self, **values: int) -> None:
        """Exit with a message if any named argument is below 1."""
        for name, value in values.items():
            if value < 1:
                print(f"--{name} must be at least 1, got {value}.")
                sys.exit(1)

    def new_game(self) -> Game:
        self._check_positive(players=self.args.players, height=self.args.height,
                             width=self.args.width)

        players = make_roster(build_colors(self.args.players, self.args.colors))
        return create_game(self.args.height, self.args.width, players)

    def play_game(self) -> None:
        """Play a game interactively, one prompt per turn."""
        self.game = self.new_game()
        print(f"Starting a new game for {len(self.game.players)} players!")
        for player in self.game.players:
            print(f"  {player}: {player.color}")
        print(f"Enter a column number (0-{self.game.width - 1}) to drop a piece, 'q' to quit.")
        print(self.game.render())

        while not self.game.is_game_over():
            move = self.get_human_move()
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return

            result = self.game.drop(move)
            if isinstance(result, Rejected):
                if result.reason == RejectReason.COLUMN_FULL:
                    print(f"Column {move} is full.")
                continue

            print(self.game.render())

        print("Game over!")
        print(self.game.status_message())

    def get_human_move(self) -> Optional[int]:
        """
        Read a move for the current player.

        Returns:
            Column index, QUIT, or None if the input was invalid
        """
        player = self.game.current_player()
        user_input = input(f"{player} ({player.color}) move: ").strip().lower()

        if user_input == 'q':
            return QUIT

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or 'q'.")
            return None

        if not 0 <= move < self.game.width:
            print(f"Column must be between 0 and {self.game.width - 1}.")
            return None
        return move

    def benchmark(self) -> None:
        """Time random-column games and standalone win checks."""
        self._check_positive(players=self.args.players)
        if self.args.iterations < 0:
            print(f"--iterations must not be negative, got {self.args.iterations}.")
            sys.exit(1)

        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        players = make_roster(build_colors(self.args.players))
        print(f"Running benchmark with {iterations} games...")

        debug.start_timer("game_simulation")
        total_moves = 0
        for _ in range(iterations):
            game = create_game(ROWS, COLS, players)
            while not game.is_game_over():
                game.drop(rng.choice(game.valid_columns()))
                total_moves += 1
        simulation_time = debug.end_timer("game_simulation")
        print(f"Played {iterations} games with {total_moves} total drops: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / max(iterations, 1) * 1000:.6f} ms per game, "
              f"{simulation_time / max(total_moves, 1) * 1000:.6f} ms per drop")

        board = Board(ROWS, COLS)
        for _ in range(ROWS * COLS // 2):
            column = rng.choice(board.valid_columns())
            board.place(board.find_landing_row(column), column, rng.choice(players).number)

        debug.start_timer("win_check")
        checks_done = 0
        for _ in range(iterations):
            for row in range(ROWS):
                for col in range(COLS):
                    player_id = board.get_cell(row, col)
                    if player_id is not None:
                        check_for_win(board, row, col, player_id)
                        checks_done += 1
        win_check_time = debug.end_timer("win_check")
        print(f"Performing {checks_done} win checks: {win_check_time:.6f} seconds total, "
              f"{win_check_time / max(checks_done, 1) * 1000:.6f} ms per check")


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.run(argv)


if __name__ == "__main__":
    main()

"""
Text menu front end and command line tool.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from tqdm import tqdm

from .difficulty import CONSOLE_TABLE, DEFAULT_TABLE
from .engine import Engine
from .errors import InvalidInput
from .generator import generate_puzzle
from .grid import Grid
from .solver import has_consistent_cells, solve


MENU = """
Options:
1. Check Solution
2. Reset Board
3. Solve Board
4. Enter a number
5. Quit"""


class ConsoleGame:
    """
    Menu loop over an Engine, reading from ``stdin`` and writing to ``stdout``.

    Rows, columns and digits are entered 1-based.
    """

    def __init__(self, engine: Engine, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.engine = engine
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> Optional[str]:
        """Prompt for one line; None at end of input."""
        print(prompt, end="", file=self.stdout)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def ask_int(self, prompt: str) -> Optional[int]:
        answer = self.ask(prompt)
        if answer is None:
            return None
        try:
            return int(answer)
        except ValueError:
            return -1

    def run(self) -> None:
        while True:
            self.say("\nCurrent Sudoku Board:")
            self.say(self.engine.current_grid().board_string())
            self.say(MENU)
            option = self.ask_int("Choose an option: ")

            if option is None or option == 5:
                self.say("Goodbye!")
                return
            if option == 1:
                if self.engine.check_solution():
                    self.say("The solution is valid!")
                else:
                    self.say("The solution is not valid.")
            elif option == 2:
                self.engine.reset_to_initial()
                self.say("Board reset to initial state.")
            elif option == 3:
                if self.engine.solve_in_place():
                    self.say("Sudoku Board Solved:")
                    self.say(self.engine.current_grid().board_string())
                else:
                    self.say("No solution exists.")
            elif option == 4:
                if not self.enter_number():
                    self.say("Goodbye!")
                    return
            else:
                self.say("Invalid option. Try again.")

    def enter_number(self) -> bool:
        """Read a row, column and digit; False when input ran out."""
        answers = []
        for prompt in ("Enter row (1-9): ", "Enter column (1-9): ", "Enter number (1-9): "):
            value = self.ask_int(prompt)
            if value is None:
                return False
            answers.append(value)

        row, col, num = answers
        try:
            self.engine.set_cell(row - 1, col - 1, num)
        except InvalidInput:
            self.say("Invalid input. Try again.")
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sudoku-engine',
        description='Generate, play and solve 9x9 Sudoku puzzles'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    play = subparsers.add_parser('play', help='Play a puzzle in the terminal')
    play.add_argument(
        '--difficulty',
        type=str,
        default='moderate',
        help='Difficulty level (%s)' % ', '.join(CONSOLE_TABLE.labels())
    )
    play.add_argument('--seed', type=int, default=None, help='Random seed')

    generate = subparsers.add_parser('generate', help='Print generated puzzles')
    generate.add_argument(
        '--difficulty',
        type=str,
        default='moderate',
        help='Difficulty level (%s)' % ', '.join(DEFAULT_TABLE.labels())
    )
    generate.add_argument('--count', type=int, default=1, help='Number of puzzles')
    generate.add_argument('--seed', type=int, default=None, help='Random seed')
    generate.add_argument(
        '--show-solution',
        action='store_true',
        help='Also print the board each puzzle was cut from'
    )

    solve_cmd = subparsers.add_parser('solve', help='Solve a puzzle given as 81 characters')
    solve_cmd.add_argument(
        'puzzle',
        type=str,
        help="Cells in row-major order, '0' or '.' for empty"
    )

    return parser


def run_generate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    removals = DEFAULT_TABLE.cells_to_remove(args.difficulty)

    for index in tqdm(range(args.count), desc='Generating', disable=args.count <= 1, file=sys.stderr):
        puzzle, solution = generate_puzzle(removals, rng)
        print(f"Puzzle {index + 1}:")
        print(puzzle.board_string())
        if args.show_solution:
            print("Solution:")
            print(solution.board_string())
    return 0


def run_solve(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    try:
        grid = Grid.from_string(args.puzzle)
    except InvalidInput as e:
        parser.error(str(e))

    if not has_consistent_cells(grid) or not solve(grid):
        print("No solution exists.")
        return 1
    print(grid.board_string())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    if args.command == 'play':
        print("Welcome to Sudoku!")
        engine = Engine(args.difficulty, table=DEFAULT_TABLE, rng=random.Random(args.seed))
        ConsoleGame(engine).run()
        return 0
    if args.command == 'generate':
        if args.count < 1:
            parser.error('--count must be at least 1')
        return run_generate(args)
    return run_solve(parser, args)


if __name__ == '__main__':
    sys.exit(main())

"""
Puzzle state shared by the front ends.
"""

import logging
import random
from typing import Optional, Union

from .difficulty import DEFAULT_TABLE, Difficulty, DifficultyTable
from .generator import generate_full_board, remove_cells
from .grid import SIZE, Grid, check_digit, check_index
from .solver import is_solution_valid, solve


log = logging.getLogger(__name__)

Label = Union[str, Difficulty]


class Engine:
    """
    A generated puzzle and the player's working copy of it.

    ``initial`` holds the clues and only changes when a new game is
    generated. ``current`` starts as a copy of it and is edited by the
    player and by the solver.

    Args:
        difficulty: Difficulty label looked up in ``table``
        table: Difficulty label to removal count mapping
        rng: Random source, mainly for reproducible games
    """

    def __init__(
        self,
        difficulty: Label = "moderate",
        table: DifficultyTable = DEFAULT_TABLE,
        rng: Optional[random.Random] = None,
    ):
        self.table = table
        self.rng = rng or random.Random()
        self.current = Grid()
        self.initial = Grid()
        self.difficulty = difficulty
        self.removals = 0
        self.new_game(difficulty)

    def new_game(self, difficulty: Optional[Label] = None) -> None:
        """Generate a fresh puzzle, keeping the current difficulty when none is given."""
        label = self.difficulty if difficulty is None else difficulty
        removals = self.table.cells_to_remove(label)

        board = generate_full_board(self.rng)
        remove_cells(board, removals, self.rng)

        self.difficulty = label
        self.removals = removals
        self.current = board
        self.initial = board.copy()
        log.info("new %s game with %d cells removed", self.difficulty, self.removals)

    def current_grid(self) -> Grid:
        return self.current

    def initial_grid(self) -> Grid:
        return self.initial.copy()

    def is_clue(self, row: int, col: int) -> bool:
        check_index("row", row)
        check_index("col", col)
        return self.initial[row, col] != 0

    def set_cell(self, row: int, col: int, value: int) -> None:
        check_index("row", row)
        check_index("col", col)
        check_digit(value)
        self.current[row, col] = int(value)

    def clear_cell(self, row: int, col: int) -> None:
        check_index("row", row)
        check_index("col", col)
        self.current[row, col] = 0

    def reset_to_initial(self) -> None:
        self.current.copy_from(self.initial)

    def clear_entries(self) -> None:
        """Empty every cell that has no clue, leaving clue positions as they are."""
        for row in range(SIZE):
            for col in range(SIZE):
                if self.initial[row, col] == 0:
                    self.current[row, col] = 0

    def solve_in_place(self) -> bool:
        """
        Solve the working grid.

        Returns:
            True if ``current`` is now solved; when False it is unchanged
        """
        return solve(self.current)

    def check_solution(self) -> bool:
        """Check that the working grid is self-consistent and can still be completed."""
        return is_solution_valid(self.current)

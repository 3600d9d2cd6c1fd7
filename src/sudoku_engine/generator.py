"""
Full-board generation and clue removal.
"""

import logging
import random
from typing import Optional, Tuple

from .errors import InvalidInput
from .grid import BOX, SIZE, Grid, box_of


log = logging.getLogger(__name__)


def fill_box(grid: Grid, row: int, col: int, rng=random) -> None:
    """
    Fill the 3x3 box at origin (row, col) with a random permutation of 1..9.

    Digits are drawn uniformly and redrawn while already used in the box.
    """
    used = [False] * (SIZE + 1)
    for i in range(BOX):
        for j in range(BOX):
            num = rng.randint(1, SIZE)
            while used[num]:
                num = rng.randint(1, SIZE)
            used[num] = True
            grid[row + i, col + j] = num


def fill_diagonal(grid: Grid, rng=random) -> None:
    """Seed the three boxes on the main diagonal; they share no row, column or box."""
    for i in range(0, SIZE, BOX):
        fill_box(grid, i, i, rng)


def fill_remaining(grid: Grid, row: int = 0, col: int = BOX) -> bool:
    """
    Recursively complete a grid whose diagonal boxes are already seeded.

    Cells are visited in row-major order starting at (row, col); the
    cursor jumps over the diagonal boxes. Digits are tried in increasing
    order and a cell is reset to 0 when none of them leads to a solution.

    Args:
        grid: Grid with its diagonal boxes filled
        row: Row of the first cell to fill
        col: Column of the first cell to fill

    Returns:
        True if every remaining cell was filled
    """
    while True:
        if col >= SIZE:
            row, col = row + 1, 0
        if row >= SIZE:
            return True
        if box_of(row) == box_of(col):
            col = box_of(col) + BOX
            continue
        break

    for num in range(1, SIZE + 1):
        if grid.is_safe(row, col, num):
            grid[row, col] = num
            if fill_remaining(grid, row, col + 1):
                return True
            grid[row, col] = 0

    return False


def generate_full_board(rng: Optional[random.Random] = None) -> Grid:
    """Generate a completely filled, valid board."""
    rng = rng or random
    grid = Grid()
    fill_diagonal(grid, rng)
    if not fill_remaining(grid):
        # Unreachable: any diagonal seed can be completed.
        raise RuntimeError("failed to complete seeded board")
    log.debug("generated full board %r", grid)
    return grid


def remove_cells(grid: Grid, count: int, rng: Optional[random.Random] = None) -> None:
    """
    Clear count non-empty cells chosen uniformly at random.

    Cells are drawn from [0, 81) and redrawn when already empty. The
    resulting puzzle is not checked for solvability or uniqueness.

    Args:
        grid: Grid to clear cells from (modified in place)
        count: Number of cells to clear
        rng: Random source
    """
    rng = rng or random
    filled = SIZE * SIZE - grid.empty_cells()
    if count < 0 or count > filled:
        raise InvalidInput(f"cannot remove {count} cells from a grid with {filled} filled cells")

    remaining = count
    while remaining > 0:
        cell_id = rng.randrange(SIZE * SIZE)
        row, col = divmod(cell_id, SIZE)
        if grid[row, col] != 0:
            grid[row, col] = 0
            remaining -= 1
    log.debug("removed %d cells", count)


def generate_puzzle(removals: int, rng: Optional[random.Random] = None) -> Tuple[Grid, Grid]:
    """
    Generate a puzzle with its source solution.

    Args:
        removals: Number of cells to clear from the full board
        rng: Random source

    Returns:
        Tuple of (puzzle, solution)
    """
    solution = generate_full_board(rng)
    puzzle = solution.copy()
    remove_cells(puzzle, removals, rng)
    return puzzle, solution

"""
Plain backtracking solver and solution checking.
"""

import logging

from .grid import SIZE, Grid


log = logging.getLogger(__name__)


def solve_rec(grid: Grid, row: int, col: int) -> bool:
    """
    Fill the empty cells from (row, col) onwards in row-major order.

    Non-zero cells are fixed and skipped. On failure every value written
    by this call has been reset to 0.
    """
    while row < SIZE and grid[row, col] != 0:
        col += 1
        if col == SIZE:
            row, col = row + 1, 0
    if row == SIZE:
        return True

    next_row, next_col = (row, col + 1) if col + 1 < SIZE else (row + 1, 0)
    for num in range(1, SIZE + 1):
        if grid.is_safe(row, col, num):
            grid[row, col] = num
            if solve_rec(grid, next_row, next_col):
                return True
            grid[row, col] = 0

    return False


def solve(grid: Grid) -> bool:
    """
    Complete a grid in place by exhaustive backtracking.

    Args:
        grid: Partially filled grid (modified in place)

    Returns:
        True if the grid was completed; when False the grid is unchanged
    """
    solved = solve_rec(grid, 0, 0)
    log.debug("solve %s, %d empty cells left", "succeeded" if solved else "failed", grid.empty_cells())
    return solved


def has_consistent_cells(grid: Grid) -> bool:
    """
    Check that no filled cell conflicts with another cell of its row, column or box.

    Each cell is cleared while its own value is checked and restored
    afterwards.
    """
    for row in range(SIZE):
        for col in range(SIZE):
            num = grid[row, col]
            if num == 0:
                continue
            grid[row, col] = 0
            safe = grid.is_safe(row, col, num)
            grid[row, col] = num
            if not safe:
                return False
    return True


def is_solution_valid(grid: Grid) -> bool:
    """
    Check that a grid's own values are consistent and that it can be completed.

    Completability is decided by solving a copy; the grid passed in is
    left as it was.
    """
    if not has_consistent_cells(grid):
        log.debug("grid has conflicting cells")
        return False
    return solve(grid.copy())

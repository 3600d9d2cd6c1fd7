"""
Unit tests for the backtracking solver and solution checks.
"""

from sudoku_engine.grid import Grid
from sudoku_engine.solver import has_consistent_cells, is_solution_valid, solve


def unsolvable_at_end(solved_grid):
    """Two early blanks that can be filled and a last cell that cannot."""
    grid = solved_grid.copy()
    grid[1, 1] = 0
    grid[2, 2] = 0
    grid[8, 8] = 0
    # 9 moves into (8, 7), so the last cell has only 7 left, which column 8 holds
    grid[8, 7] = 9
    return grid


class TestSolve:
    """Test in-place solving."""

    def test_solve_classic_puzzle(self, classic_puzzle, solved_grid):
        """Test solving the standard worked example."""
        assert solve(classic_puzzle)
        assert classic_puzzle == solved_grid

    def test_solve_solved_grid_is_noop(self, solved_grid):
        before = solved_grid.copy()
        assert solve(solved_grid)
        assert solved_grid == before

    def test_solve_empty_grid(self):
        grid = Grid()
        assert solve(grid)
        assert grid.is_solved()

    def test_solve_keeps_clues(self, classic_puzzle):
        clues = classic_puzzle.copy()
        solve(classic_puzzle)
        for r in range(9):
            for c in range(9):
                if clues[r, c] != 0:
                    assert classic_puzzle[r, c] == clues[r, c]

    def test_solve_duplicate_fails_without_changes(self, solved_grid):
        """A duplicated digit leaves the blank cell without candidates."""
        grid = solved_grid.copy()
        grid[0, 0] = 0
        grid[0, 1] = 5
        before = grid.copy()

        assert not solve(grid)
        assert grid == before

    def test_solve_failure_unwinds_tentative_fills(self, solved_grid):
        grid = unsolvable_at_end(solved_grid)
        before = grid.copy()

        assert not solve(grid)
        assert grid == before
        assert grid[1, 1] == 0
        assert grid[2, 2] == 0


class TestSolutionValidity:
    """Test solution checking."""

    def test_solved_grid_is_valid(self, solved_grid):
        assert is_solution_valid(solved_grid)

    def test_partial_consistent_grid_is_valid(self, classic_puzzle):
        before = classic_puzzle.copy()
        assert is_solution_valid(classic_puzzle)
        # Checking works on a copy
        assert classic_puzzle == before

    def test_two_fives_in_a_row(self):
        grid = Grid()
        grid[0, 0] = 5
        grid[0, 1] = 5

        assert not has_consistent_cells(grid)
        assert not is_solution_valid(grid)
        assert grid[0, 0] == 5 and grid[0, 1] == 5

    def test_wrong_entry_in_full_grid(self, solved_grid):
        solved_grid[4, 4] = 1
        assert not is_solution_valid(solved_grid)

    def test_consistent_but_not_completable(self):
        """(0, 0) needs a 9, which column 0 already holds."""
        grid = Grid()
        grid.rows[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
        grid[4, 0] = 9

        assert has_consistent_cells(grid)
        assert not is_solution_valid(grid)

    def test_consistency_check_restores_cells(self, solved_grid):
        grid = unsolvable_at_end(solved_grid)
        before = grid.copy()

        assert not has_consistent_cells(grid)
        assert grid == before

"""
Sudoku grid storage and placement predicates.
"""

import numbers
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidInput


SIZE = 9
BOX = 3

DIGITS = np.arange(1, SIZE + 1)

_IGNORED_CHARS = set(" \t\r\n|-+")


def box_of(x: int) -> int:
    """Get the origin row/column of the box containing index x."""
    return x - x % BOX


def is_integer(value) -> bool:
    """True for ints and numpy integers, but not for bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def check_index(name: str, value: int) -> None:
    """Raise InvalidInput unless value is a row/column index 0..8."""
    if not is_integer(value) or not 0 <= value < SIZE:
        raise InvalidInput(f"{name} must be in 0..{SIZE - 1}, got {value!r}")


def check_digit(value: int) -> None:
    """Raise InvalidInput unless value is a digit 1..9."""
    if not is_integer(value) or not 1 <= value <= SIZE:
        raise InvalidInput(f"value must be in 1..{SIZE}, got {value!r}")


class Grid:
    """
    A 9x9 Sudoku board of ints, 0 meaning an empty cell.

    Cells are kept as a list of row lists; the predicates below scan
    a single row, column or box and are O(9).
    """

    def __init__(self, rows: Optional[Iterable[Sequence[int]]] = None):
        if rows is None:
            self.rows: List[List[int]] = [[0] * SIZE for _ in range(SIZE)]
            return

        cells = [list(row) for row in rows]
        if len(cells) != SIZE or any(len(row) != SIZE for row in cells):
            raise InvalidInput(f"grid must be {SIZE}x{SIZE}")
        for row in cells:
            for v in row:
                if not is_integer(v) or not 0 <= v <= SIZE:
                    raise InvalidInput(f"cell values must be in 0..{SIZE}, got {v!r}")
        self.rows = [[int(v) for v in row] for row in cells]

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """
        Parse a board from 81 cell characters.

        Digits 1-9 are clues, '0' or '.' mark empty cells. Whitespace and
        the '|', '-', '+' characters of a rendered board are skipped.

        Args:
            text: Board text

        Returns:
            Parsed grid
        """
        values = []
        for ch in text:
            if ch in _IGNORED_CHARS:
                continue
            if ch == '.':
                values.append(0)
            elif ch in "0123456789":
                values.append(int(ch))
            else:
                raise InvalidInput(f"unexpected character {ch!r} in puzzle")

        if len(values) != SIZE * SIZE:
            raise InvalidInput(f"puzzle must have {SIZE * SIZE} cells, got {len(values)}")

        return cls(values[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE))

    def __getitem__(self, key: Tuple[int, int]) -> int:
        row, col = key
        return self.rows[row][col]

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        row, col = key
        self.rows[row][col] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        flat = "".join(str(v) for row in self.rows for v in row)
        return f"Grid({flat!r})"

    def copy(self) -> "Grid":
        """Return an independent copy of this grid."""
        grid = Grid()
        grid.copy_from(self)
        return grid

    def copy_from(self, other: "Grid") -> None:
        """Overwrite every cell with the values of another grid."""
        for r in range(SIZE):
            self.rows[r][:] = other.rows[r]

    def in_row(self, row: int, value: int) -> bool:
        return value in self.rows[row]

    def in_column(self, col: int, value: int) -> bool:
        for r in range(SIZE):
            if self.rows[r][col] == value:
                return True
        return False

    def in_box(self, box_row: int, box_col: int, value: int) -> bool:
        """Check whether value occurs in the box whose origin is (box_row, box_col)."""
        for r in range(box_row, box_row + BOX):
            if value in self.rows[r][box_col:box_col + BOX]:
                return True
        return False

    def is_safe(self, row: int, col: int, value: int) -> bool:
        """
        Check whether value can be placed at (row, col).

        The target cell itself takes part in the scan, so it must be
        empty (or cleared by the caller) for the answer to be meaningful.
        """
        return (
            not self.in_row(row, value)
            and not self.in_column(col, value)
            and not self.in_box(box_of(row), box_of(col), value)
        )

    def empty_cells(self) -> int:
        """Count cells holding 0."""
        return sum(row.count(0) for row in self.rows)

    def is_full(self) -> bool:
        return self.empty_cells() == 0

    def to_array(self) -> np.ndarray:
        """Return the board as a (9, 9) int8 array."""
        return np.array(self.rows, dtype=np.int8)

    def is_solved(self) -> bool:
        """Check that every row, column and box is a permutation of 1..9."""
        board = self.to_array()
        boxes = board.reshape(BOX, BOX, BOX, BOX).swapaxes(1, 2).reshape(SIZE, SIZE)

        for units in (board, board.T, boxes):
            if not (np.sort(units, axis=1) == DIGITS).all():
                return False
        return True

    def board_string(self) -> str:
        """
        Render the board as text.

        Returns:
            Formatted string representation, '.' for empty cells
        """
        separator = "+" + "+".join(["-" * (2 * BOX + 1)] * BOX) + "+"
        lines = [separator]

        for band in range(0, SIZE, BOX):
            for row in self.rows[band:band + BOX]:
                cells = ["." if v == 0 else str(v) for v in row]
                chunks = [" ".join(cells[c:c + BOX]) for c in range(0, SIZE, BOX)]
                lines.append("| " + " | ".join(chunks) + " |")
            lines.append(separator)

        return "\n".join(lines)

"""
Exceptions raised by the Sudoku engine.
"""


class InvalidInput(ValueError):
    """Raised for out-of-range coordinates or digits and malformed grids."""

"""
Sudoku generation, solving and checking engine
"""

__version__ = '1.0.0'

from .difficulty import (
    CONSOLE_TABLE,
    DEFAULT_TABLE,
    GRAPHICAL_TABLE,
    Difficulty,
    DifficultyTable,
)
from .engine import Engine
from .errors import InvalidInput
from .generator import generate_full_board, generate_puzzle, remove_cells
from .grid import BOX, SIZE, Grid
from .solver import is_solution_valid, solve

__all__ = [
    'BOX',
    'SIZE',
    'Grid',
    'InvalidInput',
    'Difficulty',
    'DifficultyTable',
    'CONSOLE_TABLE',
    'GRAPHICAL_TABLE',
    'DEFAULT_TABLE',
    'generate_full_board',
    'generate_puzzle',
    'remove_cells',
    'solve',
    'is_solution_valid',
    'Engine',
]

"""
Difficulty labels and the number of cells removed for each.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Union

from .errors import InvalidInput
from .grid import SIZE


DEFAULT_REMOVALS = 40


class Difficulty(Enum):
    """Sudoku difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"
    EVIL = "evil"


@dataclass
class DifficultyTable:
    """
    Maps difficulty labels to how many cells are cleared from a full board.

    Lookup is case-insensitive; unknown labels get ``default``.
    """
    removals: Dict[str, int] = field(default_factory=dict)
    default: int = DEFAULT_REMOVALS

    def __post_init__(self):
        self.removals = {label.lower(): count for label, count in self.removals.items()}
        for label, count in [*self.removals.items(), ("default", self.default)]:
            if not 0 <= count <= SIZE * SIZE:
                raise InvalidInput(f"{label}: cannot remove {count} of {SIZE * SIZE} cells")

    def cells_to_remove(self, label: Union[str, Difficulty, None]) -> int:
        if isinstance(label, Difficulty):
            label = label.value
        if label is None:
            return self.default
        return self.removals.get(label.strip().lower(), self.default)

    def labels(self) -> List[str]:
        return list(self.removals)


# Text menu front end
CONSOLE_TABLE = DifficultyTable({
    "easy": 20,
    "moderate": 40,
    "hard": 55,
    "god": 64,
})

# Graphical front end
GRAPHICAL_TABLE = DifficultyTable({
    Difficulty.EASY.value: 20,
    Difficulty.MEDIUM.value: 40,
    Difficulty.HARD.value: 55,
    Difficulty.EXPERT.value: 64,
    Difficulty.EVIL.value: 70,
})

DEFAULT_TABLE = DifficultyTable({**CONSOLE_TABLE.removals, **GRAPHICAL_TABLE.removals})

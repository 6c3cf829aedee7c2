"""
Board primitives for two-player TicTacToe.
Marks, outcomes and the 9-cell board layout.
"""

from enum import Enum
from typing import List, Optional


# The board is a flat list of 9 cells, index = row * 3 + col
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Mark(Enum):
    """The symbol a player places."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is None when empty
Board = List[Optional[Mark]]


class Outcome(Enum):
    """Resolution state of a single game."""
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    TIE = "tie"

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        return cls.X_WINS if mark == Mark.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Mark]:
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return None

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS


def new_board() -> Board:
    """Create an empty board."""
    return [None] * CELL_COUNT


def index_to_cell(index: int) -> tuple:
    """Convert a board index (0-8) to (row, col)."""
    return divmod(index, BOARD_SIZE)

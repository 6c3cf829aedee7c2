"""
Win checker for two-player TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .board import CELL_COUNT, Mark, Outcome


Line = Tuple[int, int, int]


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating a board."""
    outcome: Outcome
    winning_line: Optional[Line] = None

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally).
    Lines are checked in table order, so the first complete
    line is the one reported.
    """

    # All possible winning lines, as board indices
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Sequence[Optional[Mark]]) -> Evaluation:
        """
        Evaluate a board.

        Args:
            board: 9 cells, each None or a Mark.

        Returns:
            Evaluation with the outcome and, for a win, the winning line.

        Raises:
            ValueError: If the board does not have exactly 9 cells.
        """
        if len(board) != CELL_COUNT:
            raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(board)}")

        for line in self.WINNING_LINES:
            mark = self._check_line(board, line)
            if mark is not None:
                return Evaluation(Outcome.win_for(mark), line)

        if all(cell is not None for cell in board):
            return Evaluation(Outcome.TIE)

        return Evaluation(Outcome.IN_PROGRESS)

    def check_winner(self, board: Sequence[Optional[Mark]]) -> Optional[Mark]:
        """Get the winning Mark, or None if no winner yet."""
        return self.evaluate(board).winner

    def check_draw(self, board: Sequence[Optional[Mark]]) -> bool:
        """A draw is a full board with no completed line."""
        return self.evaluate(board).outcome == Outcome.TIE

    def get_winning_line(self, board: Sequence[Optional[Mark]]) -> Optional[Line]:
        """Get the winning line if there is one."""
        return self.evaluate(board).winning_line

    def _check_line(self, board: Sequence[Optional[Mark]], line: Line) -> Optional[Mark]:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

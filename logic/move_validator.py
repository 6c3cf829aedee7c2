"""
Move validator for two-player TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from .board import CELL_COUNT

if TYPE_CHECKING:
    from .game_state import GameState


class RejectionReason(Enum):
    """Why a move was refused."""
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectionReason] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be an integer in 0-8
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: "GameState", index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Board index to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.GAME_OVER,
                error_message="Game is already over!"
            )

        # bool is an int subclass but never a cell
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.OUT_OF_RANGE,
                error_message=f"Invalid position {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of playable board indices.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()

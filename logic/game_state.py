"""
Game state management for two-player TicTacToe.
Tracks the board, whose turn it is, the outcome and the session score.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .board import BOARD_SIZE, Board, Mark, Outcome, new_board
from .move_validator import MoveValidator, RejectionReason
from .win_checker import Line, WinChecker


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """
    What happened to a move request.

    Truthy when the move was accepted, so callers can write
    ``if game.apply_move(i): ...``.
    """
    accepted: bool
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted


def _new_score() -> Dict[Mark, int]:
    return {Mark.X: 0, Mark.O: 0}


@dataclass
class GameState:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - The 9-cell board
    - Current player, and who started the current game
    - Outcome of the current game and its winning line
    - Games won by each mark (kept across restarts)
    """

    # Flat 3x3 board - None means empty
    board: Board = field(default_factory=new_board)

    # Whose move is next
    current_player: Mark = Mark.X

    # Who made the first move of the current game
    starting_player: Mark = Mark.X

    outcome: Outcome = Outcome.IN_PROGRESS
    winning_line: Optional[Line] = None

    # Games won this session
    score: Dict[Mark, int] = field(default_factory=_new_score)

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)
    validator: MoveValidator = field(default_factory=MoveValidator, repr=False, compare=False)

    @classmethod
    def new(cls, first_player: Mark = Mark.X) -> "GameState":
        """Start a session where ``first_player`` opens the first game."""
        return cls(current_player=first_player, starting_player=first_player)

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    def apply_move(self, index: int) -> MoveResult:
        """
        Place the current player's mark at the given index.

        Args:
            index: Board index (0-8).

        Returns:
            MoveResult; rejected moves leave the state untouched.
        """
        validation = self.validator.validate_move(self, index)
        if not validation.is_valid:
            logger.debug("Rejected move %r: %s", index, validation.error_message)
            return MoveResult(
                accepted=False,
                reason=validation.reason,
                message=validation.error_message
            )

        mark = self.current_player
        self.board[index] = mark
        self.current_player = mark.opposite()
        logger.debug("%s played cell %d", mark.value, index)

        evaluation = self.win_checker.evaluate(self.board)
        self.outcome = evaluation.outcome
        self.winning_line = evaluation.winning_line

        if evaluation.winner is not None:
            self.score[evaluation.winner] += 1
            logger.info(
                "%s wins on line %s (score X=%d O=%d)",
                evaluation.winner.value, evaluation.winning_line,
                self.score[Mark.X], self.score[Mark.O]
            )
        elif self.outcome == Outcome.TIE:
            logger.info("Game tied")

        return MoveResult(accepted=True)

    def restart(self) -> None:
        """
        Clear the board for a new game, keeping the score.

        After a win the losing mark starts the next game. After a tie,
        or a game abandoned before it finished, the same mark starts again.
        """
        if self.winner is not None:
            next_starter = self.winner.opposite()
        else:
            next_starter = self.starting_player

        self.board = new_board()
        self.outcome = Outcome.IN_PROGRESS
        self.winning_line = None
        self.starting_player = next_starter
        self.current_player = next_starter
        logger.info("Game restarted, %s to start", next_starter.value)

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return [i for i, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameState":
        """Create a copy of the game state that shares no mutable data."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            starting_player=self.starting_player,
            outcome=self.outcome,
            winning_line=self.winning_line,
            score=dict(self.score)
        )

    def status_text(self) -> str:
        """One-line status for display."""
        if self.outcome == Outcome.TIE:
            return "It's a tie!"
        if self.winner is not None:
            return f"Player {self.winner.value} wins!"
        return f"Turn: {self.current_player.value}"

    def score_text(self) -> str:
        return f"X: {self.score[Mark.X]}  O: {self.score[Mark.O]}"

    def render(self) -> str:
        """
        Render the board as text.
        Empty cells show their 1-based number so a console player can pick them.
        """
        rows = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                mark = self.board[index]
                cells.append(mark.value if mark is not None else str(index + 1))
            rows.append(" | ".join(cells))
        return "\n---------\n".join(rows)

"""
Logic module for two-player TicTacToe.
Handles the board, rules, outcome and score.
"""

from .board import Mark, Outcome
from .game_state import GameState, MoveResult
from .move_validator import MoveValidator, RejectionReason
from .win_checker import Evaluation, WinChecker

__version__ = "1.0.0"

"""
Tests for move validation.
"""

from logic import GameState, MoveValidator, RejectionReason


class TestMoveValidator:
    def setup_method(self):
        self.validator = MoveValidator()
        self.game = GameState()

    def test_valid_move(self):
        result = self.validator.validate_move(self.game, 4)
        assert result.is_valid
        assert result.reason is None
        assert result.error_message is None

    def test_occupied_cell(self):
        self.game.apply_move(4)
        result = self.validator.validate_move(self.game, 4)
        assert not result.is_valid
        assert result.reason == RejectionReason.CELL_OCCUPIED
        assert "occupied by X" in result.error_message

    def test_out_of_range(self):
        for index in (-1, 9):
            result = self.validator.validate_move(self.game, index)
            assert result.reason == RejectionReason.OUT_OF_RANGE

    def test_game_over_checked_first(self):
        for index in (0, 1, 4, 2, 8):
            self.game.apply_move(index)
        # Even an out-of-range index reports the finished game
        assert self.validator.validate_move(self.game, 42).reason == RejectionReason.GAME_OVER
        assert self.validator.validate_move(self.game, 0).reason == RejectionReason.GAME_OVER

    def test_get_valid_moves(self):
        assert self.validator.get_valid_moves(self.game) == list(range(9))
        self.game.apply_move(0)
        self.game.apply_move(8)
        assert self.validator.get_valid_moves(self.game) == [1, 2, 3, 4, 5, 6, 7]

    def test_no_valid_moves_after_game_over(self):
        for index in (0, 1, 4, 2, 8):
            self.game.apply_move(index)
        assert self.validator.get_valid_moves(self.game) == []

"""Tests for submove legality and destination computation."""

import pytest

from pubeval_engine.core.board import highest_occupied_point
from pubeval_engine.core.rules import compute_destination, is_legal_submove
from pubeval_engine.core.types import BEAR_OFF, INVALID_POINT, OPPONENT_BAR
from pubeval_engine.errors import ContractViolation, EngineError


class TestComputeDestination:
    """Tests for compute_destination."""

    def test_plain_move(self):
        assert compute_destination(12, 6, 1) == 18
        assert compute_destination(0, 3, 0) == 3

    def test_overshoot_outside_bear_off_is_invalid(self):
        # Rearmost checker on 10: no bearing off yet
        assert compute_destination(22, 6, 10) == INVALID_POINT

    def test_exact_bear_off_remapped(self):
        """Landing one pip past point 24 means bearing off."""
        assert compute_destination(24, 1, 19) == BEAR_OFF
        assert compute_destination(20, 5, 19) == BEAR_OFF

    def test_landing_on_opponent_bar_remapped_before_home(self):
        assert compute_destination(20, 5, 3) == BEAR_OFF

    def test_die_larger_than_rearmost_distance(self):
        # Rearmost on 21 is 4 pips from off: a 6 sends any checker off
        assert compute_destination(21, 6, 21) == BEAR_OFF
        assert compute_destination(23, 6, 21) == BEAR_OFF

    def test_die_equal_to_rearmost_distance(self):
        # Rearmost on 19 is exactly 6 pips away: no overshoot rule
        assert compute_destination(19, 6, 19) == BEAR_OFF
        assert compute_destination(22, 6, 19) == INVALID_POINT


class TestContract:
    """The validator only answers for mover checkers."""

    def test_opponent_origin_raises(self, opening_board):
        with pytest.raises(ContractViolation):
            is_legal_submove(opening_board, 1, 6, 7)

    def test_empty_origin_raises(self, opening_board):
        with pytest.raises(ContractViolation) as excinfo:
            is_legal_submove(opening_board, 1, 2, 3)
        assert excinfo.value.context["origin"] == 2
        assert "CONTRACT_VIOLATION" in str(excinfo.value)

    def test_is_engine_error(self):
        assert issubclass(ContractViolation, EngineError)


class TestValidator:
    """Tests for is_legal_submove rules."""

    def test_legal_moves_at_opening(self, opening_board):
        assert is_legal_submove(opening_board, 1, 17, 18)
        assert is_legal_submove(opening_board, 6, 12, 18)
        assert is_legal_submove(opening_board, 6, 1, 7)

    def test_beyond_bear_off_slot(self, opening_board):
        assert not is_legal_submove(opening_board, 6, 19, INVALID_POINT)
        assert not is_legal_submove(opening_board, 6, 19, 27)

    def test_opponent_bar_never_a_destination(self, opening_board):
        assert not is_legal_submove(opening_board, 6, 19, OPPONENT_BAR)

    def test_bar_checkers_move_first(self, opening_board):
        opening_board[0] = 1
        opening_board[19] = 4
        assert not is_legal_submove(opening_board, 1, 17, 18)
        assert is_legal_submove(opening_board, 2, 0, 2)

    def test_distance_must_match_die(self, opening_board):
        assert not is_legal_submove(opening_board, 3, 1, 5)

    def test_blocked_point(self, opening_board):
        # Five opponent checkers on 6
        assert not is_legal_submove(opening_board, 5, 1, 6)

    def test_blot_can_be_hit(self, opening_board):
        opening_board[5] = -1
        assert is_legal_submove(opening_board, 4, 1, 5)

    def test_entering_blocked_from_bar(self, opening_board):
        opening_board[0] = 1
        opening_board[1] = 1
        assert not is_legal_submove(opening_board, 6, 0, 6)
        assert is_legal_submove(opening_board, 4, 0, 4)


class TestBearOff:
    """Tests for bear-off legality."""

    def test_exact_bear_off(self, bearoff_board):
        assert is_legal_submove(bearoff_board, 2, 23, BEAR_OFF)
        assert is_legal_submove(bearoff_board, 4, 21, BEAR_OFF)

    def test_overshoot_from_rearmost_point(self, bearoff_board):
        assert highest_occupied_point(bearoff_board) == 21
        assert is_legal_submove(bearoff_board, 6, 21, BEAR_OFF)

    def test_overshoot_from_closer_point_rejected(self, bearoff_board):
        """A checker on 21 is still behind the one on 23."""
        assert not is_legal_submove(bearoff_board, 6, 23, BEAR_OFF)
        assert not is_legal_submove(bearoff_board, 3, 23, BEAR_OFF)

    def test_overshoot_maps_only_from_rearmost(self, bearoff_board):
        """Generator path: destination then validation."""
        rearmost = highest_occupied_point(bearoff_board)
        for origin, expected in ((21, True), (23, False)):
            destination = compute_destination(origin, 6, rearmost)
            assert destination == BEAR_OFF
            assert is_legal_submove(bearoff_board, 6, origin, destination) is expected

    def test_no_bear_off_with_checker_outside_home(self, bearoff_board):
        bearoff_board[18] = 1
        bearoff_board[23] = 1
        destination = compute_destination(24, 1, highest_occupied_point(bearoff_board))
        assert destination == BEAR_OFF
        bearoff_board[24] = 1
        bearoff_board[BEAR_OFF] -= 1
        assert not is_legal_submove(bearoff_board, 1, 24, BEAR_OFF)
        assert not is_legal_submove(bearoff_board, 2, 23, BEAR_OFF)

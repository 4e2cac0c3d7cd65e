"""Tests for dice utilities."""

import pytest

from pubeval_engine.core.dice import (
    dice_orderings,
    dice_slots,
    dice_to_string,
    die_for_submove,
    is_doubles,
    validate_dice,
)
from pubeval_engine.errors import EngineError, InvalidDice


class TestDiceUtilities:
    """Tests for dice utility functions."""

    def test_is_doubles(self):
        assert is_doubles((1, 1))
        assert is_doubles((6, 6))
        assert not is_doubles((1, 2))

    def test_validate_dice(self):
        assert validate_dice((6, 1)) == (6, 1)
        assert validate_dice([3, 3]) == (3, 3)
        with pytest.raises(InvalidDice):
            validate_dice((0, 3))
        with pytest.raises(InvalidDice):
            validate_dice((7, 1))
        with pytest.raises(InvalidDice) as excinfo:
            validate_dice((1, 2, 3))
        assert "INVALID_DICE" in str(excinfo.value)
        assert excinfo.value.context["dice"] == (1, 2, 3)

    def test_invalid_dice_is_engine_error(self):
        assert issubclass(InvalidDice, EngineError)

    def test_dice_to_string(self):
        assert dice_to_string((3, 5)) == "3-5"
        assert dice_to_string((4, 4)) == "Double 4s"


class TestDiceSlots:
    """Tests for the generator's die-usage slots."""

    def test_non_double_uses_two_slots(self):
        assert dice_slots((3, 5)) == [3, 5, 0, 0]

    def test_double_uses_four_equal_slots(self):
        slots = dice_slots((4, 4))
        assert slots == [4, 4, 4, 4]
        assert len([s for s in slots if s]) == 4

    def test_non_double_tries_both_orders(self):
        assert dice_orderings((1, 6)) == [[1, 6, 0, 0], [6, 1, 0, 0]]
        assert dice_orderings((6, 1)) == [[6, 1, 0, 0], [1, 6, 0, 0]]

    def test_double_single_pass(self):
        assert dice_orderings((2, 2)) == [[2, 2, 2, 2]]


class TestDieForSubmove:
    """Tests for recovering the die a submove used."""

    def test_regular_move(self):
        assert die_for_submove(17, 18) == 1
        assert die_for_submove(12, 18) == 6

    def test_enter_from_bar(self):
        assert die_for_submove(0, 6) == 6

    def test_bear_off_corrects_for_slot_offset(self):
        assert die_for_submove(24, 26) == 1
        assert die_for_submove(19, 26) == 6

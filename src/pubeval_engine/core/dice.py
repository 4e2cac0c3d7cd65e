"""Dice utilities for the move engine.

This module turns a dice roll into the die-usage slots consumed by the
move generator, and maps submoves back to the die they used.
"""

from typing import List
from pubeval_engine.core.types import BEAR_OFF, Dice, MAX_SUBMOVES, Point
from pubeval_engine.errors import InvalidDice


def is_doubles(dice: Dice) -> bool:
    """Check if dice roll is doubles."""
    return dice[0] == dice[1]


def validate_dice(dice: Dice) -> Dice:
    """Check a roll has two values in 1..6 and return it as a tuple of ints.

    Raises:
        InvalidDice: if the roll does not hold exactly two values in 1..6
    """
    if len(dice) != 2:
        raise InvalidDice(f"Expected two dice, got {len(dice)}", {"dice": tuple(dice)})
    die1, die2 = int(dice[0]), int(dice[1])
    if not (1 <= die1 <= 6 and 1 <= die2 <= 6):
        raise InvalidDice("Dice values must be 1-6", {"dice": (die1, die2)})
    return (die1, die2)


def dice_slots(dice: Dice) -> List[int]:
    """Build the four die-usage slots for one generation pass.

    A double fills all four slots with the rolled value. A non-double uses
    the first two slots and leaves zeros behind them, which end the
    recursion after two submoves.

    Args:
        dice: Dice roll tuple, in the order the dice should be used

    Returns:
        List of four die values

    Examples:
        >>> dice_slots((3, 5))
        [3, 5, 0, 0]
        >>> dice_slots((4, 4))
        [4, 4, 4, 4]
    """
    if is_doubles(dice):
        return [dice[0]] * MAX_SUBMOVES
    return [dice[0], dice[1], 0, 0]


def dice_orderings(dice: Dice) -> List[List[int]]:
    """Get the die-usage slots for every pass the generator has to run.

    Playing die A before die B can reach positions that B-then-A cannot,
    so a non-double is searched in both orders.

    Examples:
        >>> dice_orderings((1, 6))
        [[1, 6, 0, 0], [6, 1, 0, 0]]
        >>> dice_orderings((2, 2))
        [[2, 2, 2, 2]]
    """
    if is_doubles(dice):
        return [dice_slots(dice)]
    return [dice_slots(dice), dice_slots((dice[1], dice[0]))]


def die_for_submove(origin: Point, destination: Point) -> int:
    """Calculate the die value implied by a submove.

    The borne-off slot sits one index past the opponent's bar, so a
    bear-off looks one pip longer than the die that produced it.

    Examples:
        >>> die_for_submove(17, 18)
        1
        >>> die_for_submove(24, 26)
        1
    """
    die = destination - origin
    if destination == BEAR_OFF:
        die -= 1
    return die


def dice_to_string(dice: Dice) -> str:
    """Convert dice to readable string.

    Examples:
        >>> dice_to_string((3, 5))
        '3-5'
        >>> dice_to_string((4, 4))
        'Double 4s'
    """
    if is_doubles(dice):
        return f"Double {dice[0]}s"
    else:
        return f"{dice[0]}-{dice[1]}"

"""Submove legality for the mover's checkers.

Only standard backgammon rules are supported, and only for the mover. The
opponent's checkers are never moved by the engine, so asking about one is a
contract violation rather than an illegal move.
"""

from pubeval_engine.core.board import highest_occupied_point
from pubeval_engine.core.types import (
    Board,
    BEAR_OFF,
    HOME_BOARD_START,
    INVALID_POINT,
    MOVER_BAR,
    OPPONENT_BAR,
    Point,
)
from pubeval_engine.errors import ContractViolation


def compute_destination(origin: Point, die: int, highest_occupied: Point) -> Point:
    """Calculate where a checker lands with a given die.

    While bearing off, a die larger than the distance from the rearmost
    checker to home sends the checker off the board. Any other move past
    the last point is invalid. A move landing on slot 25 (one pip past
    point 24) is remapped to the borne-off slot.

    Args:
        origin: Slot the checker leaves
        die: Die value (1-6)
        highest_occupied: The mover's rearmost slot, see highest_occupied_point

    Returns:
        Destination slot, or INVALID_POINT if the move cannot exist
    """
    destination = origin + die
    if OPPONENT_BAR - highest_occupied < die:
        return BEAR_OFF
    if destination >= BEAR_OFF:
        return INVALID_POINT
    if destination == OPPONENT_BAR:
        return BEAR_OFF
    return destination


def is_legal_submove(board: Board, die: int, origin: Point, destination: Point) -> bool:
    """Check whether the mover may play origin -> destination with die.

    Args:
        board: Current board
        die: Die value being used (1-6)
        origin: Slot the checker leaves; must hold a mover checker
        destination: Slot the checker would land on

    Returns:
        True if the submove is legal

    Raises:
        ContractViolation: origin does not hold a mover checker
    """
    if board[origin] <= 0:
        raise ContractViolation(
            "origin does not hold a mover checker",
            {"origin": origin, "count": board[origin]},
        )

    if destination > BEAR_OFF:
        return False

    if destination == OPPONENT_BAR:
        return False

    # A checker on the bar must enter before anything else moves
    if board[MOVER_BAR] != 0 and origin != MOVER_BAR:
        return False

    if destination == BEAR_OFF:
        rearmost = highest_occupied_point(board)
        exact_point = OPPONENT_BAR - die
        if rearmost < HOME_BOARD_START:
            return False
        if origin == exact_point:
            return True
        # Overshooting is only allowed from the rearmost checker
        return exact_point < rearmost and origin == rearmost

    if destination - origin != die:
        return False

    if board[destination] < -1:
        return False

    return True

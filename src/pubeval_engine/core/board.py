"""Board construction, submove application and queries.

All functions take the mover's point of view: the mover's checkers are
positive and travel from point 1 towards point 24 and then off the board
into slot 26. Opponent checkers are negative.

Point numbering (mover's home board is 19-24):
    13 14 15 16 17 18    19 20 21 22 23 24
    +------------------+------------------+
    |                  |                  |  mover home
    |                  |                  |
    |                  |                  |
    |                  |                  |
    +------------------+------------------+
    12 11 10  9  8  7     6  5  4  3  2  1
"""

from typing import List, Tuple
import numpy as np
from pubeval_engine.core.types import (
    Board,
    BoardLike,
    BOARD_SIZE,
    BEAR_OFF,
    CHECKERS_PER_SIDE,
    LAST_POINT,
    MOVER_BAR,
    MoveSequence,
    OPPONENT_BAR,
    OPPONENT_OFF,
    Point,
)


# ==============================================================================
# BOARD CONSTRUCTION
# ==============================================================================

def initial_board() -> Board:
    """Create the standard backgammon starting position.

    Standard setup from the mover's side:
    - Mover: 2 on 1, 5 on 12, 3 on 17, 5 on 19
    - Opponent: 5 on 6, 3 on 8, 5 on 13, 2 on 24

    Returns:
        Board in starting position
    """
    board = Board()

    board[1] = 2
    board[12] = 5
    board[17] = 3
    board[19] = 5

    board[6] = -5
    board[8] = -3
    board[13] = -5
    board[24] = -2
    return board


def empty_board() -> Board:
    """Create an empty board with no checkers."""
    return Board()


def as_board(board: BoardLike) -> Board:
    """Coerce a Board or a 28-long integer sequence into a fresh Board.

    The result never shares memory with the argument, so the caller's own
    board is never touched by the search.
    """
    if isinstance(board, Board):
        return board.copy()
    return Board(slots=np.array(board, dtype=np.int32))


def copy_board(board: Board) -> Board:
    """Clone a board."""
    return board.copy()


# ==============================================================================
# SUBMOVE APPLICATION
# ==============================================================================

def apply_submove(board: Board, origin: Point, destination: Point) -> bool:
    """Move one mover checker (mutates board).

    Precondition: the submove has been validated. A lone opponent checker
    on the destination is hit and sent to the opponent's bar.

    Args:
        board: Board to move on
        origin: Slot to move from
        destination: Slot to move to

    Returns:
        True if an opponent blot was hit
    """
    hit = board[destination] == -1
    if hit:
        board[OPPONENT_BAR] -= 1
        board[destination] = 0
    board[origin] -= 1
    board[destination] += 1
    return hit


def undo_submove(board: Board, origin: Point, destination: Point, hit: bool) -> None:
    """Reverse apply_submove (mutates board).

    Args:
        board: Board the submove was applied to
        origin: Slot the checker came from
        destination: Slot the checker went to
        hit: Value returned by apply_submove
    """
    board[destination] -= 1
    board[origin] += 1
    if hit:
        board[destination] = -1
        board[OPPONENT_BAR] += 1


def apply_sequence(board: BoardLike, sequence: MoveSequence) -> Board:
    """Play a whole move sequence on a copy of the board.

    Args:
        board: Starting board (left untouched)
        sequence: Sequence returned by the search

    Returns:
        New board after every submove
    """
    result = as_board(board)
    for submove in sequence:
        apply_submove(result, submove.origin, submove.destination)
    return result


# ==============================================================================
# BOARD QUERIES
# ==============================================================================

def highest_occupied_point(board: Board) -> Point:
    """Find the mover's rearmost checker.

    Scans from the bar towards home and returns the first slot holding a
    mover checker. "Highest" is meant from the mover's side: the bar and
    point 1 are furthest from home. Returns 25 when the mover has no
    checker on the bar or on the points.
    """
    point = MOVER_BAR
    while point <= LAST_POINT and board[point] <= 0:
        point += 1
    return point


def is_valid_board(board: Board) -> Tuple[bool, str]:
    """Validate a board state.

    Args:
        board: Board to validate

    Returns:
        (is_valid, error_message) tuple
    """
    if len(board.slots) != BOARD_SIZE:
        return False, f"Board has {len(board.slots)} slots, should have {BOARD_SIZE}"

    if board[MOVER_BAR] < 0:
        return False, f"Mover bar holds {board[MOVER_BAR]}, must be >= 0"
    if board[OPPONENT_BAR] > 0:
        return False, f"Opponent bar holds {board[OPPONENT_BAR]}, must be <= 0"
    if not 0 <= board[BEAR_OFF] <= CHECKERS_PER_SIDE:
        return False, f"Mover borne off {board[BEAR_OFF]}, must be 0-15"

    points = board.slots[1:LAST_POINT + 1]
    mover_total = board[MOVER_BAR] + int(points[points > 0].sum()) + board[BEAR_OFF]
    opponent_total = -board[OPPONENT_BAR] - int(points[points < 0].sum()) + abs(board[OPPONENT_OFF])

    if mover_total != CHECKERS_PER_SIDE:
        return False, f"Mover has {mover_total} checkers, should have {CHECKERS_PER_SIDE}"

    if opponent_total != CHECKERS_PER_SIDE:
        return False, f"Opponent has {opponent_total} checkers, should have {CHECKERS_PER_SIDE}"

    return True, ""


# ==============================================================================
# BOARD DISPLAY (for debugging)
# ==============================================================================

def board_to_string(board: Board) -> str:
    """Convert board to string representation.

    Args:
        board: Board to display

    Returns:
        One line per occupied slot, mover counts positive
    """
    lines: List[str] = []
    lines.append("=" * 30)
    lines.append("Slot | Count")
    lines.append("-----+------")

    for point in range(BOARD_SIZE):
        count = board[point]
        if point == MOVER_BAR:
            name = "BAR  "
        elif point == OPPONENT_BAR:
            name = "OBAR "
        elif point == BEAR_OFF:
            name = "OFF  "
        elif point == OPPONENT_OFF:
            name = "OOFF "
        else:
            name = f"{point:2d}   "
        if count != 0 or point in (MOVER_BAR, BEAR_OFF):
            lines.append(f"{name}|  {count:3d}")

    lines.append("=" * 30)
    return "\n".join(lines)


def print_board(board: Board) -> None:
    """Write the slot table for a board to stdout."""
    print(board_to_string(board))

"""Tesauro's public evaluation function (pubeval).

Computes a linear score ``W . X`` where X is a raw encoding of the number
of checkers on each point and W is one of two weight vectors: one for race
positions and one for contact positions. The function makes plenty of
obvious mistakes but plays a decent benchmark-level game.

Points are encoded from the mover's home outwards: feature group 0
describes point 24, feature group 23 describes point 1.
"""

import numpy as np
from numpy.typing import NDArray

from pubeval_engine.core.types import (
    Board,
    BEAR_OFF,
    CHECKERS_PER_SIDE,
    FIRST_POINT,
    LAST_POINT,
    MOVER_BAR,
    OPPONENT_BAR,
)
from pubeval_engine.evaluation.weights import (
    BAR_FEATURE,
    BORNE_OFF_FEATURE,
    DEFAULT_WEIGHTS,
    FEATURES_PER_POINT,
    NUM_FEATURES,
    PubevalWeights,
)


# Score for a position with every mover checker borne off
WIN_SCORE = 99999999.0


def encode_features(board: Board) -> NDArray[np.float32]:
    """Build the 122-element pubeval input vector.

    Args:
        board: Board to encode

    Returns:
        Float32 feature vector
    """
    x = np.zeros(NUM_FEATURES, dtype=np.float32)

    for j in range(FIRST_POINT, LAST_POINT + 1):
        n = board[OPPONENT_BAR - j]
        if n == 0:
            continue
        base = FEATURES_PER_POINT * (j - 1)
        if n == -1:
            x[base + 0] = 1.0
        if n == 1:
            x[base + 1] = 1.0
        if n >= 2:
            x[base + 2] = 1.0
        if n == 3:
            x[base + 3] = 1.0
        if n >= 4:
            x[base + 4] = (n - 3) / 2.0

    x[BAR_FEATURE] = -board[MOVER_BAR] / 2.0
    x[BORNE_OFF_FEATURE] = board[BEAR_OFF] / float(CHECKERS_PER_SIDE)
    return x


def is_racing(board: Board) -> bool:
    """Check if the sides have disengaged.

    The position is a race when the mover's rearmost checker (scanning
    from the bar) is already past the opponent's rearmost checker
    (scanning from the opponent's bar), so no checker can be hit again.

    Args:
        board: Board state to check

    Returns:
        True if no further contact is possible
    """
    me = MOVER_BAR
    while me <= LAST_POINT and board[me] <= 0:
        me += 1

    you = OPPONENT_BAR
    while you >= FIRST_POINT and board[you] >= 0:
        you -= 1

    return me > you


def evaluate(board: Board, weights: PubevalWeights = DEFAULT_WEIGHTS) -> float:
    """Score a position from the mover's side.

    Args:
        board: Position after the mover's candidate move
        weights: Race/contact weight tables

    Returns:
        Linear score, higher is better; WIN_SCORE when all checkers are off
    """
    if board[BEAR_OFF] == CHECKERS_PER_SIDE:
        return WIN_SCORE

    x = encode_features(board)
    w = weights.select(is_racing(board))
    return float(np.dot(w, x))

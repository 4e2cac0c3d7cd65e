"""Core board representation and move rules."""

from pubeval_engine.core.types import (
    Board,
    BoardLike,
    Dice,
    MoveObserver,
    MoveSequence,
    Point,
    Submove,
)

__all__ = [
    "Board",
    "BoardLike",
    "Dice",
    "MoveObserver",
    "MoveSequence",
    "Point",
    "Submove",
]

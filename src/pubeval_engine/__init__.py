"""
Pubeval Engine - backgammon move selection with Tesauro's linear evaluation.
"""

__version__ = "0.1.0"

# Core exports
from pubeval_engine.core.types import (
    Board,
    Dice,
    MoveObserver,
    MoveSequence,
    Submove,
)
from pubeval_engine.errors import ContractViolation, EngineError, InvalidDice
from pubeval_engine.evaluation.search import select_best_move

__all__ = [
    "Board",
    "Dice",
    "MoveObserver",
    "MoveSequence",
    "Submove",
    "ContractViolation",
    "EngineError",
    "InvalidDice",
    "select_best_move",
]

"""Exception hierarchy for the pubeval engine.

Two kinds of caller misuse surface as exceptions rather than a plain
"illegal move" answer: asking the validator about a checker that does not
belong to the mover (``ContractViolation``) and passing a roll that is not
two values in 1..6 (``InvalidDice``).

Usage:
    from pubeval_engine.errors import ContractViolation

    try:
        is_legal_submove(board, die, origin, destination)
    except ContractViolation as e:
        logger.error(f"Bad origin {e.context['origin']}: {e.message}")
        raise
"""

from typing import Any, Dict, Optional

__all__ = [
    "EngineError",
    "ContractViolation",
    "InvalidDice",
]


class EngineError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra values for debugging
    """
    code: str = "ENGINE_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({details})"
        return f"[{self.code}] {self.message}"


class ContractViolation(EngineError):
    """The validator was asked about a slot without a mover checker.

    Move generation only supports the mover's side, so this always means
    the caller passed a wrong origin. It is not meant to be recovered from.
    """
    code = "CONTRACT_VIOLATION"


class InvalidDice(EngineError):
    """A roll passed to the engine is not two values in 1..6."""
    code = "INVALID_DICE"

"""Player agents built on the move engine.

A game shell holds an agent, hands it the board and the roll each turn and
applies the returned sequence to its own board:
- Pubeval agent: picks the best move by the pubeval evaluation
- Random agent: picks uniformly among all legal sequences (a baseline)
"""

from dataclasses import dataclass, field
from typing import Callable, Optional
import numpy as np

from pubeval_engine.core.types import BoardLike, Dice, MoveObserver, MoveSequence
from pubeval_engine.evaluation.search import enumerate_sequences, select_best_move
from pubeval_engine.evaluation.weights import DEFAULT_WEIGHTS, PubevalWeights


# ==============================================================================
# AGENT BASE CLASS
# ==============================================================================


@dataclass
class Agent:
    """Agent that plays the mover's side.

    Attributes:
        name: Agent name for identification
        select_move_fn: Function choosing a sequence for (board, dice, observer)
        observer: Callback shown every candidate the agent considers
    """
    name: str
    select_move_fn: Callable[[BoardLike, Dice, Optional[MoveObserver]], MoveSequence]
    observer: Optional[MoveObserver] = field(default=None, repr=False)

    def set_observer(self, observer: Optional[MoveObserver]) -> None:
        """Register (or clear with None) the per-candidate callback."""
        self.observer = observer

    def select_move(self, board: BoardLike, dice: Dice) -> MoveSequence:
        """Select a move sequence.

        Args:
            board: Current 28-slot board
            dice: Dice roll

        Returns:
            Selected sequence (possibly empty)
        """
        return self.select_move_fn(board, dice, self.observer)


# ==============================================================================
# PUBEVAL AGENT
# ==============================================================================


def pubeval_agent(weights: Optional[PubevalWeights] = None) -> Agent:
    """Create an agent that plays the highest-scoring pubeval move.

    Args:
        weights: Weight tables (uses Tesauro's published tables if None)

    Returns:
        Pubeval agent
    """
    if weights is None:
        weights = DEFAULT_WEIGHTS

    def select_pubeval_move(board: BoardLike, dice: Dice, observer: Optional[MoveObserver]) -> MoveSequence:
        return select_best_move(board, dice, observer=observer, weights=weights)

    return Agent(name="Pubeval", select_move_fn=select_pubeval_move)


# ==============================================================================
# RANDOM AGENT
# ==============================================================================


def random_agent(seed: Optional[int] = None) -> Agent:
    """Create an agent that selects moves uniformly at random.

    Every finished sequence the generator produces counts as one choice,
    so transpositions reached in different orders are weighted separately.

    Args:
        seed: Random seed (optional, for reproducibility)

    Returns:
        Random agent
    """
    rng = np.random.default_rng(seed)

    def select_random_move(board: BoardLike, dice: Dice, observer: Optional[MoveObserver]) -> MoveSequence:
        """Select a random legal move."""
        candidates = []
        for sequence, _ in enumerate_sequences(board, dice):
            if observer is not None:
                observer(sequence.clone())
            candidates.append(sequence)
        if not candidates:
            return MoveSequence()  # No legal moves
        idx = rng.integers(0, len(candidates))
        return candidates[idx].clone()

    return Agent(name="Random", select_move_fn=select_random_move)

"""Move generation and selection for one dice roll.

The generator walks every legal way to play the roll: for each die in turn
it tries every mover checker, copies the board, plays the submove on the
copy and recurses. Each branch owns its board and its sequence, so sibling
branches never see each other's moves.

The selector folds every finished sequence into a best-so-far:
- normally the higher pubeval score wins;
- when both the incumbent and the candidate are solitude sequences (only
  one die could be played), the one using the higher die wins regardless
  of score, as the rules require.

All search state lives in a per-call context, so one process can run any
number of searches side by side with the shared, read-only weight tables.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from pubeval_engine.core.board import apply_submove, as_board, highest_occupied_point
from pubeval_engine.core.dice import dice_orderings, die_for_submove, dice_to_string, validate_dice
from pubeval_engine.core.rules import compute_destination, is_legal_submove
from pubeval_engine.core.types import (
    Board,
    BoardLike,
    BEAR_OFF,
    Dice,
    LAST_POINT,
    MAX_SUBMOVES,
    MOVER_BAR,
    MoveObserver,
    MoveSequence,
)
from pubeval_engine.evaluation.pubeval import evaluate
from pubeval_engine.evaluation.weights import DEFAULT_WEIGHTS, PubevalWeights

logger = logging.getLogger(__name__)

# Candidate produced by the generator: the sequence and the board it leads to
Candidate = Tuple[MoveSequence, Board]


# ==============================================================================
# GENERATION
# ==============================================================================

def _recurse(board: Board, slots: List[int], depth: int, sequence: MoveSequence) -> Iterator[Candidate]:
    """Yield every finished sequence reachable from this branch.

    Args:
        board: Board owned by this branch
        slots: Four die-usage slots; a zero ends the sequence early
        depth: Index of the die to play next
        sequence: Submoves played so far on this branch
    """
    if depth == MAX_SUBMOVES or slots[depth] == 0:
        yield sequence, board
        return

    die = slots[depth]
    rearmost = highest_occupied_point(board)
    continuations = 0

    for origin in range(MOVER_BAR, LAST_POINT + 1):
        if board[origin] <= 0:
            continue
        destination = compute_destination(origin, die, rearmost)
        if destination > BEAR_OFF or not is_legal_submove(board, die, origin, destination):
            continue

        branch_board = board.copy()
        apply_submove(branch_board, origin, destination)
        branch_sequence = sequence.clone()
        branch_sequence.add(origin, destination)
        continuations += 1
        yield from _recurse(branch_board, slots, depth + 1, branch_sequence)

    # The other die cannot be played from anywhere: what we have is forced
    if continuations == 0 and sequence.number_of_submoves > 0:
        sequence.mark_as_solitude()
        yield sequence, board


def enumerate_sequences(board: BoardLike, dice: Dice) -> Iterator[Candidate]:
    """Generate every finished move sequence for a roll.

    Non-doubles are searched twice, once per die order. Sequences are
    yielded in generation order, which the selector relies on to break
    score ties in favour of the first candidate.

    Args:
        board: Position to move from (not modified)
        dice: Rolled dice

    Yields:
        (sequence, resulting_board) pairs. Nothing is yielded when no
        checker can move at all.
    """
    start = as_board(board)
    for slots in dice_orderings(validate_dice(dice)):
        yield from _recurse(start, slots, 0, MoveSequence())


# ==============================================================================
# SELECTION
# ==============================================================================

@dataclass
class SearchResult:
    """Result of searching for the best move.

    Attributes:
        best_move: The chosen sequence (empty if nothing can move)
        best_score: Score of the chosen sequence, -inf if none
        candidates_considered: Number of finished sequences folded
    """
    best_move: MoveSequence
    best_score: float
    candidates_considered: int


class _SearchContext:
    """Best-so-far state for a single search call."""

    def __init__(self, weights: PubevalWeights, observer: Optional[MoveObserver] = None):
        self.weights = weights
        self.observer = observer
        self.best_move = MoveSequence()
        self.best_score = float("-inf")
        self.candidates = 0

    def consider(self, sequence: MoveSequence, board: Board) -> None:
        """Fold one finished sequence into the best-so-far."""
        self.candidates += 1
        if self.observer is not None:
            self.observer(sequence.clone())

        score = evaluate(board, self.weights)

        if self.best_move.solitude and sequence.solitude:
            best_die = die_for_submove(self.best_move.origin(0), self.best_move.destination(0))
            new_die = die_for_submove(sequence.origin(0), sequence.destination(0))
            if new_die > best_die:
                self.best_move = sequence.clone()
                self.best_score = score
        elif score > self.best_score:
            self.best_move = sequence.clone()
            self.best_score = score

    def result(self) -> SearchResult:
        return SearchResult(
            best_move=self.best_move,
            best_score=self.best_score,
            candidates_considered=self.candidates,
        )


def search(
    board: BoardLike,
    dice: Dice,
    observer: Optional[MoveObserver] = None,
    weights: PubevalWeights = DEFAULT_WEIGHTS,
) -> SearchResult:
    """Find the best move and report how it was found.

    Args:
        board: Position to move from (not modified)
        dice: Rolled dice
        observer: Optional callback receiving a copy of every candidate
            before it is scored
        weights: Race/contact weight tables

    Returns:
        SearchResult with the best sequence and its score
    """
    context = _SearchContext(weights, observer)
    for sequence, resulting_board in enumerate_sequences(board, dice):
        context.consider(sequence, resulting_board)

    result = context.result()
    logger.debug(
        "Dice %s: %d candidates, chose %s (score=%.5f)",
        dice_to_string(dice),
        result.candidates_considered,
        result.best_move,
        result.best_score,
    )
    return result


def select_best_move(
    board: BoardLike,
    dice: Dice,
    observer: Optional[MoveObserver] = None,
    weights: PubevalWeights = DEFAULT_WEIGHTS,
) -> MoveSequence:
    """Select the best move sequence for the mover.

    Precondition: board is a structurally valid position for the mover.

    Args:
        board: 28-slot board (Board or integer sequence)
        dice: Two dice values, 1-6 each
        observer: Optional per-candidate callback
        weights: Race/contact weight tables

    Returns:
        Best sequence; zero submoves when no checker can move
    """
    return search(board, dice, observer=observer, weights=weights).best_move


def generate(board: BoardLike, dice: Dice) -> MoveSequence:
    """Generate and select a move with the default weights."""
    return select_best_move(board, dice)

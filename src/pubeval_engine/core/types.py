"""Core type definitions for the pubeval move engine.

This module defines the board container, the single-checker submove and the
move sequence returned by the search.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Sequence, Tuple, Union
import numpy as np
from numpy.typing import NDArray


# ==============================================================================
# BOARD REPRESENTATION
# ==============================================================================

# Type aliases
Point = int  # 0-27, see the slot constants below
CheckerCount = int  # signed: positive = mover, negative = opponent

BOARD_SIZE = 28
MOVER_BAR = 0
FIRST_POINT = 1
LAST_POINT = 24
OPPONENT_BAR = 25
BEAR_OFF = 26
OPPONENT_OFF = 27

# Destination returned for moves that overshoot without being a legal bear-off
INVALID_POINT = 99

CHECKERS_PER_SIDE = 15
HOME_BOARD_START = 19  # mover's home board is points 19-24
MAX_SUBMOVES = 4


# Dice type
Dice = Tuple[int, int]  # (die1, die2) where 1 <= die1, die2 <= 6


@dataclass
class Board:
    """Board state seen from the mover's side.

    The board has 28 signed slots:
    - Slot 0: mover's checkers on the bar (>= 0)
    - Slots 1-24: points; the mover moves towards higher numbers.
      Positive values are mover checkers, negative values opponent checkers.
    - Slot 25: opponent's checkers on the bar (stored <= 0)
    - Slot 26: mover's borne-off checkers (0-15)
    - Slot 27: opponent's borne-off checkers

    Attributes:
        slots: Array of signed checker counts (length 28)
    """
    slots: NDArray[np.int32] = field(default_factory=lambda: np.zeros(BOARD_SIZE, dtype=np.int32))

    def __post_init__(self):
        """Validate board shape."""
        self.slots = np.asarray(self.slots, dtype=np.int32)
        assert self.slots.shape == (BOARD_SIZE,), f"Board must have {BOARD_SIZE} slots, got {self.slots.shape}"

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(slots=self.slots.copy())

    def __getitem__(self, point: Point) -> CheckerCount:
        return int(self.slots[point])

    def __setitem__(self, point: Point, count: CheckerCount) -> None:
        self.slots[point] = count

    def __len__(self) -> int:
        return BOARD_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.slots, other.slots))

    def to_list(self) -> List[int]:
        """Return the slots as a plain list of ints."""
        return [int(v) for v in self.slots]


BoardLike = Union[Board, Sequence[int], NDArray[np.int32]]


# ==============================================================================
# MOVES
# ==============================================================================

@dataclass(frozen=True)
class Submove:
    """A single checker movement.

    Attributes:
        origin: Slot the checker leaves (0=bar, 1-24=points)
        destination: Slot the checker lands on (1-24=points, 26=borne off)
    """
    origin: Point
    destination: Point

    def __post_init__(self):
        """Validate submove."""
        assert MOVER_BAR <= self.origin <= LAST_POINT, f"Invalid origin: {self.origin}"
        assert FIRST_POINT <= self.destination <= BEAR_OFF, f"Invalid destination: {self.destination}"

    def __str__(self) -> str:
        return f"({self.origin}-{self.destination})"


@dataclass
class MoveSequence:
    """Up to four submoves played with one dice roll.

    A sequence is "solitude" when it was formed with only one usable die
    because no continuation existed for the other. Between two solitude
    sequences the one using the higher die must be played.

    Attributes:
        submoves: Submoves in the order they are played
        solitude: Whether this is a forced single-die sequence
    """
    submoves: List[Submove] = field(default_factory=list)
    solitude: bool = False

    def __post_init__(self):
        """Validate sequence length."""
        assert len(self.submoves) <= MAX_SUBMOVES, f"At most {MAX_SUBMOVES} submoves, got {len(self.submoves)}"

    def add(self, origin: Point, destination: Point) -> None:
        """Append a submove (mutates the sequence)."""
        assert len(self.submoves) < MAX_SUBMOVES, "Move sequence is full"
        self.submoves.append(Submove(origin, destination))

    def clone(self) -> "MoveSequence":
        """Create an independent copy of the sequence."""
        return MoveSequence(submoves=list(self.submoves), solitude=self.solitude)

    def mark_as_solitude(self) -> None:
        self.solitude = True

    @property
    def number_of_submoves(self) -> int:
        return len(self.submoves)

    def origin(self, index: int) -> Point:
        return self.submoves[index].origin

    def destination(self, index: int) -> Point:
        return self.submoves[index].destination

    def as_pairs(self) -> List[Tuple[Point, Point]]:
        """Return the submoves as (origin, destination) tuples."""
        return [(s.origin, s.destination) for s in self.submoves]

    def __len__(self) -> int:
        return len(self.submoves)

    def __iter__(self) -> Iterator[Submove]:
        return iter(self.submoves)

    def __str__(self) -> str:
        marker = "solitude" if self.solitude else ""
        return "Move: " + marker + "".join(f"{s} " for s in self.submoves)


# Callback invoked with a copy of every candidate sequence the search finalizes
MoveObserver = Callable[[MoveSequence], None]

"""Command-line entrypoint for pubeval-engine.

Selects a move for one position and roll and prints it. The game loop
itself is left to the caller; this only exposes the engine for quick
inspection from a shell.
"""

from __future__ import annotations

import argparse
import logging

from pubeval_engine import __version__
from pubeval_engine.core.board import as_board, initial_board, is_valid_board, print_board
from pubeval_engine.core.dice import dice_to_string
from pubeval_engine.core.types import BOARD_SIZE
from pubeval_engine.evaluation.search import search


def _die(value: str) -> int:
    die = int(value)
    if not 1 <= die <= 6:
        raise argparse.ArgumentTypeError(f"die must be 1-6, got {die}")
    return die


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="pubeval-engine",
        description="Pick a backgammon move with Tesauro's pubeval",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pubeval-engine {__version__}",
    )
    parser.add_argument(
        "--dice",
        nargs=2,
        type=_die,
        required=True,
        metavar=("DIE1", "DIE2"),
        help="Rolled dice",
    )
    parser.add_argument(
        "--board",
        nargs=BOARD_SIZE,
        type=int,
        metavar="N",
        help=f"{BOARD_SIZE} signed slot counts from the mover's side (default: opening position)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug-level logging and list every candidate",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint used by the `pubeval-engine` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    log = logging.getLogger("pubeval_engine")

    board = as_board(args.board) if args.board else initial_board()
    ok, message = is_valid_board(board)
    if not ok:
        log.warning("Board looks malformed: %s", message)

    dice = (args.dice[0], args.dice[1])
    observer = (lambda move: log.debug("Considering %s", move)) if args.verbose else None
    result = search(board, dice, observer=observer)

    print_board(board)
    print(f"Dice: {dice_to_string(dice)}")
    if result.best_move.number_of_submoves == 0:
        print("No legal move")
    else:
        print(f"{result.best_move}  score={result.best_score:.5f}")
    print(f"Candidates considered: {result.candidates_considered}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Pytest configuration and shared fixtures."""

import pytest

from pubeval_engine.core.board import empty_board, initial_board
from pubeval_engine.core.types import BEAR_OFF


@pytest.fixture
def opening_board():
    """Standard starting position from the mover's side."""
    return initial_board()


@pytest.fixture
def empty():
    """Board without any checkers."""
    return empty_board()


@pytest.fixture
def bearoff_board():
    """Mover bearing off: rearmost checkers on 21, the rest on 23."""
    board = empty_board()
    board[21] = 3
    board[23] = 2
    board[BEAR_OFF] = 10
    board[3] = -15
    return board

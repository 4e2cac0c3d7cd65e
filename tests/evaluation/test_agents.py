"""Tests for player agents."""

import numpy as np

from pubeval_engine.core.board import empty_board
from pubeval_engine.core.types import MoveSequence
from pubeval_engine.evaluation.agents import Agent, pubeval_agent, random_agent
from pubeval_engine.evaluation.search import enumerate_sequences
from pubeval_engine.evaluation.weights import NUM_FEATURES, PubevalWeights


def _dancing_board():
    board = empty_board()
    board[0] = 2
    board[19] = 13
    for point in range(1, 7):
        board[point] = -2
    board[27] = 3
    return board


class TestPubevalAgent:
    """Tests for the pubeval agent."""

    def test_creation(self):
        agent = pubeval_agent()
        assert isinstance(agent, Agent)
        assert agent.name == "Pubeval"

    def test_selects_reference_move(self, opening_board):
        agent = pubeval_agent()
        move = agent.select_move(opening_board, (1, 6))
        assert move.as_pairs() == [(17, 18), (12, 18)]

    def test_observer_registration(self, opening_board):
        agent = pubeval_agent()
        seen = []
        agent.set_observer(seen.append)
        agent.select_move(opening_board, (1, 6))
        assert len(seen) > 0

        count = len(seen)
        agent.set_observer(None)
        agent.select_move(opening_board, (1, 6))
        assert len(seen) == count

    def test_flat_weights_keep_first_candidate(self, opening_board):
        """Flat weights still return a legal sequence."""
        weights = PubevalWeights(race=np.zeros(NUM_FEATURES), contact=np.zeros(NUM_FEATURES))
        agent = pubeval_agent(weights)
        move = agent.select_move(opening_board, (1, 6))
        legal = [s.as_pairs() for s, _ in enumerate_sequences(opening_board, (1, 6))]
        # All scores tie, so the first generated sequence is kept
        assert move.as_pairs() == legal[0]

    def test_no_legal_move(self):
        move = pubeval_agent().select_move(_dancing_board(), (5, 6))
        assert move.number_of_submoves == 0


class TestRandomAgent:
    """Tests for the random baseline agent."""

    def test_creation(self):
        agent = random_agent(seed=42)
        assert agent.name == "Random"

    def test_selects_legal_move(self, opening_board):
        agent = random_agent(seed=42)
        legal = [s.as_pairs() for s, _ in enumerate_sequences(opening_board, (4, 2))]
        for _ in range(10):
            move = agent.select_move(opening_board, (4, 2))
            assert move.as_pairs() in legal

    def test_reproducible_with_seed(self, opening_board):
        a = random_agent(seed=7)
        b = random_agent(seed=7)
        for dice in [(1, 2), (3, 3), (6, 5)]:
            assert a.select_move(opening_board, dice).as_pairs() == b.select_move(opening_board, dice).as_pairs()

    def test_no_legal_move(self):
        move = random_agent(seed=0).select_move(_dancing_board(), (5, 6))
        assert isinstance(move, MoveSequence)
        assert move.number_of_submoves == 0

    def test_observer_sees_candidates(self, opening_board):
        agent = random_agent(seed=1)
        seen = []
        agent.set_observer(seen.append)
        agent.select_move(opening_board, (2, 1))
        assert len(seen) == len(list(enumerate_sequences(opening_board, (2, 1))))

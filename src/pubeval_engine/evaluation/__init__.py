"""Position evaluation, move generation and agents."""

from pubeval_engine.evaluation.agents import (
    Agent,
    pubeval_agent,
    random_agent,
)
from pubeval_engine.evaluation.pubeval import (
    WIN_SCORE,
    encode_features,
    evaluate,
    is_racing,
)
from pubeval_engine.evaluation.search import (
    SearchResult,
    enumerate_sequences,
    generate,
    search,
    select_best_move,
)
from pubeval_engine.evaluation.weights import (
    CONTACT_WEIGHTS,
    DEFAULT_WEIGHTS,
    RACE_WEIGHTS,
    PubevalWeights,
)

__all__ = [
    "Agent",
    "pubeval_agent",
    "random_agent",
    "WIN_SCORE",
    "encode_features",
    "evaluate",
    "is_racing",
    "SearchResult",
    "enumerate_sequences",
    "generate",
    "search",
    "select_best_move",
    "CONTACT_WEIGHTS",
    "DEFAULT_WEIGHTS",
    "RACE_WEIGHTS",
    "PubevalWeights",
]

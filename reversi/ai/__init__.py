"""Heuristic move selection."""

from .evaluator import (
    CORNER_VALUE,
    EDGE_CAPTURE_VALUE,
    EDGE_VALUE,
    INTERIOR_CAPTURE_VALUE,
    INTERIOR_VALUE,
    captured_value,
    cell_value,
    score_captures,
    score_move,
)
from .strategy import (
    STRATEGIES,
    Difficulty,
    HeuristicPolicy,
    beginner_move_scores,
    choose_move,
    professional_move_scores,
    select_best,
)

__all__ = [
    "CORNER_VALUE",
    "EDGE_CAPTURE_VALUE",
    "EDGE_VALUE",
    "INTERIOR_CAPTURE_VALUE",
    "INTERIOR_VALUE",
    "captured_value",
    "cell_value",
    "score_captures",
    "score_move",
    "STRATEGIES",
    "Difficulty",
    "HeuristicPolicy",
    "beginner_move_scores",
    "choose_move",
    "professional_move_scores",
    "select_best",
]

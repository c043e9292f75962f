"""Evaluation helpers for comparing Reversi policies."""

from .match import EvaluationResult, Policy, RandomPolicy, evaluate_policies, play_game

__all__ = ["EvaluationResult", "Policy", "RandomPolicy", "evaluate_policies", "play_game"]

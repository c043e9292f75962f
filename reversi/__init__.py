"""Reversi engine with heuristic computer opponents."""

from . import ai, core, evaluation, session
from .ai import Difficulty, HeuristicPolicy, choose_move
from .config import ConfigError, GameConfig, load_config
from .core import (
    CellType,
    Coordinate,
    GameResult,
    GameState,
    IllegalMoveError,
    InvalidCoordinateError,
    Player,
)
from .evaluation import EvaluationResult, RandomPolicy, evaluate_policies
from .session import (
    GameMode,
    GameSession,
    apply_move,
    choose_ai_move,
    disc_counts,
    is_game_over,
    legal_moves,
    new_game,
    winner,
)

__all__ = [
    "ai",
    "core",
    "evaluation",
    "session",
    "Difficulty",
    "HeuristicPolicy",
    "choose_move",
    "ConfigError",
    "GameConfig",
    "load_config",
    "CellType",
    "Coordinate",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "InvalidCoordinateError",
    "Player",
    "EvaluationResult",
    "RandomPolicy",
    "evaluate_policies",
    "GameMode",
    "GameSession",
    "apply_move",
    "choose_ai_move",
    "disc_counts",
    "is_game_over",
    "legal_moves",
    "new_game",
    "winner",
]

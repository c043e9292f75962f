"""Game session owning the live board."""

from .game import (
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

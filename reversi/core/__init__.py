"""Core game logic for Reversi."""

from .geometry import (
    BOARD_SIZE,
    DIRECTIONS,
    Coordinate,
    Direction,
    InvalidCoordinateError,
    all_coordinates,
)
from .state import CellType, GameResult, GameState, MoveRecord, Player
from .rules import (
    IllegalMoveError,
    apply_move,
    captured_discs,
    final_result,
    has_legal_move,
    initialize_game_state,
    is_legal,
    legal_move_mask,
    legal_moves,
    place_disc,
    settle_turn,
)

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "Coordinate",
    "Direction",
    "InvalidCoordinateError",
    "all_coordinates",
    "CellType",
    "GameResult",
    "GameState",
    "MoveRecord",
    "Player",
    "IllegalMoveError",
    "apply_move",
    "captured_discs",
    "final_result",
    "has_legal_move",
    "initialize_game_state",
    "is_legal",
    "legal_move_mask",
    "legal_moves",
    "place_disc",
    "settle_turn",
]

"""Static positional heuristic for a single candidate move.

The score of a move is the value of the square it lands on plus the value of
every disc it flips. Corners and edges are worth more because discs there are
hard to flip back.
"""

from __future__ import annotations

import math
from typing import Sequence

from reversi.core import Coordinate, GameState, Player, captured_discs

CORNER_VALUE = 0.8
EDGE_VALUE = 0.4
INTERIOR_VALUE = 0.0

EDGE_CAPTURE_VALUE = 2.0
INTERIOR_CAPTURE_VALUE = 1.0

ILLEGAL_SCORE = -math.inf


def cell_value(position: Coordinate) -> float:
    if position.is_corner:
        return CORNER_VALUE
    if position.is_edge:
        return EDGE_VALUE
    return INTERIOR_VALUE


def captured_value(position: Coordinate) -> float:
    # corners count as edges here
    if position.is_edge:
        return EDGE_CAPTURE_VALUE
    return INTERIOR_CAPTURE_VALUE


def score_captures(position: Coordinate, captured: Sequence[Coordinate]) -> float:
    if not captured:
        return ILLEGAL_SCORE
    return cell_value(position) + sum(captured_value(disc) for disc in captured)


def score_move(state: GameState, position: Coordinate, mover: Player) -> float:
    return score_captures(position, captured_discs(state, position, mover))

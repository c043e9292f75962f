from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from reversi.core import Coordinate, GameState, Player, legal_moves, place_disc

from .evaluator import ILLEGAL_SCORE, score_captures, score_move

logger = logging.getLogger(__name__)

ScoredMove = Tuple[Coordinate, float]


class Difficulty(Enum):
    BEGINNER = "beginner"
    PROFESSIONAL = "professional"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def beginner_move_scores(state: GameState, player: Player) -> List[ScoredMove]:
    """Score every legal move on the current board."""
    return [(move, score_move(state, move, player)) for move in legal_moves(state, player)]


def professional_move_scores(state: GameState, player: Player) -> List[ScoredMove]:
    """Score every legal move as its own value minus the opponent's best reply.

    Each move is played out on a copy of ``state``; the input is never mutated.
    """
    opponent = player.opposite
    scored: List[ScoredMove] = []
    for move in legal_moves(state, player):
        simulated = state.copy()
        flipped = place_disc(simulated, move, player)
        my_score = score_captures(move, flipped)

        opponent_best = 0.0
        replies = legal_moves(simulated, opponent)
        if replies:
            opponent_best = max(score_move(simulated, reply, opponent) for reply in replies)

        scored.append((move, my_score - opponent_best))
    return scored


STRATEGIES: Dict[Difficulty, Callable[[GameState, Player], List[ScoredMove]]] = {
    Difficulty.BEGINNER: beginner_move_scores,
    Difficulty.PROFESSIONAL: professional_move_scores,
}


def select_best(scored: Sequence[ScoredMove]) -> Optional[ScoredMove]:
    """Highest score wins; on a tie the earliest entry is kept."""
    best: Optional[ScoredMove] = None
    best_score = ILLEGAL_SCORE
    for move, score in scored:
        if score > best_score:
            best = (move, score)
            best_score = score
    return best


def choose_move(state: GameState, player: Player, difficulty: Difficulty) -> Optional[Coordinate]:
    best = select_best(STRATEGIES[difficulty](state, player))
    if best is None:
        return None
    move, score = best
    logger.debug(
        "%s AI (%s) chose %s with score %.2f",
        player.display_name,
        difficulty.value,
        move.to_field(),
        score,
    )
    return move


class HeuristicPolicy:
    """Move picker bound to one difficulty tier."""

    def __init__(self, difficulty: Difficulty = Difficulty.BEGINNER) -> None:
        self.difficulty = difficulty

    def act(self, state: GameState, player: Optional[Player] = None) -> Optional[Coordinate]:
        if player is None:
            player = state.current_player
        return choose_move(state, player, self.difficulty)

    def __repr__(self) -> str:
        return f"HeuristicPolicy({self.difficulty.value})"

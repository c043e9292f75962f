from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import numpy as np

from reversi.core import (
    Coordinate,
    GameResult,
    GameState,
    Player,
    apply_move,
    initialize_game_state,
    legal_moves,
)

logger = logging.getLogger(__name__)


class Policy(Protocol):
    def act(self, state: GameState, player: Optional[Player] = None) -> Optional[Coordinate]:
        ...


@dataclass
class EvaluationResult:
    games_played: int
    black_wins: int
    white_wins: int
    draws: int
    average_length: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)


class RandomPolicy:
    """Uniformly random legal move, used as a baseline opponent."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState, player: Optional[Player] = None) -> Optional[Coordinate]:
        moves = legal_moves(state, player)
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]


def play_game(
    black_policy: Policy,
    white_policy: Policy,
    *,
    opening_moves: int = 0,
    rng: Optional[np.random.Generator] = None,
) -> GameState:
    """Play one game to the end and return the final state.

    The first ``opening_moves`` plies are random so that deterministic
    policies do not replay the same game every time.
    """
    opener = RandomPolicy(rng)
    state = initialize_game_state()
    while not state.is_terminal:
        if state.ply_count < opening_moves:
            policy: Policy = opener
        else:
            policy = black_policy if state.current_player == Player.BLACK else white_policy
        move = policy.act(state.copy(), state.current_player)
        if move is None:
            raise RuntimeError(f"{policy!r} returned no move in a live position")
        state = apply_move(state, move)
    return state


def evaluate_policies(
    black_policy: Policy,
    white_policy: Policy,
    *,
    episodes: int,
    opening_moves: int = 0,
    rng: Optional[np.random.Generator] = None,
) -> EvaluationResult:
    rng = rng or np.random.default_rng()

    black_wins = 0
    white_wins = 0
    draws = 0
    total_ply = 0

    for episode in range(episodes):
        final = play_game(black_policy, white_policy, opening_moves=opening_moves, rng=rng)
        total_ply += final.ply_count
        if final.result == GameResult.BLACK_WIN:
            black_wins += 1
        elif final.result == GameResult.WHITE_WIN:
            white_wins += 1
        else:
            draws += 1
        logger.debug("Episode %d finished: %s after %d plies", episode, final.result.value, final.ply_count)

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        black_wins=black_wins,
        white_wins=white_wins,
        draws=draws,
        average_length=average_length,
    )

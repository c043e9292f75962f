from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from reversi.ai import Difficulty, choose_move
from reversi.core import (
    Coordinate,
    GameState,
    MoveRecord,
    Player,
    apply_move as apply_move_to_state,
    initialize_game_state,
    is_legal,
    legal_moves as legal_moves_for,
    settle_turn,
)

logger = logging.getLogger(__name__)


class GameMode(Enum):
    HUMAN_VS_HUMAN = "human_vs_human"
    HUMAN_VS_COMPUTER = "human_vs_computer"


class GameSession:
    """Owns the live game state and is the only thing that mutates it.

    Callers get copies from :meth:`snapshot`; moves go through
    :meth:`apply_move`, which reports an illegal move by returning ``False``
    and leaving the state untouched.
    """

    def __init__(
        self,
        *,
        mode: GameMode = GameMode.HUMAN_VS_HUMAN,
        difficulty: Difficulty = Difficulty.BEGINNER,
        ai_player: Player = Player.WHITE,
        state: Optional[GameState] = None,
    ) -> None:
        self.mode = mode
        self.difficulty = difficulty
        self.ai_player = ai_player
        if state is not None:
            self._state = state.copy()
            settle_turn(self._state)
        else:
            self._state = initialize_game_state()
        self._history: List[MoveRecord] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def is_game_over(self) -> bool:
        return self._state.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner

    @property
    def history(self) -> List[MoveRecord]:
        return list(self._history)

    def snapshot(self) -> GameState:
        return self._state.copy()

    def legal_moves(self) -> List[Coordinate]:
        if self._state.is_terminal:
            return []
        return legal_moves_for(self._state)

    def is_legal(self, position: Coordinate) -> bool:
        return not self._state.is_terminal and is_legal(self._state, position, self.current_player)

    def disc_counts(self) -> Tuple[int, int]:
        return self._state.counts()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def apply_move(self, position: Coordinate) -> bool:
        if not self.is_legal(position):
            return False
        self._state = apply_move_to_state(self._state, position)
        self._history.append(self._state.last_move)
        return True

    def reset(self) -> None:
        self._state = initialize_game_state()
        self._history = []
        logger.debug("Session reset")

    # ------------------------------------------------------------------
    # Computer player
    # ------------------------------------------------------------------
    def choose_ai_move(
        self,
        player: Optional[Player] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> Optional[Coordinate]:
        if self._state.is_terminal:
            return None
        player = player if player is not None else self.current_player
        difficulty = difficulty if difficulty is not None else self.difficulty
        return choose_move(self.snapshot(), player, difficulty)

    def is_ai_turn(self) -> bool:
        return (
            self.mode == GameMode.HUMAN_VS_COMPUTER
            and not self._state.is_terminal
            and self.current_player == self.ai_player
        )

    def play_ai_turn(self) -> Optional[Coordinate]:
        if not self.is_ai_turn():
            return None
        move = self.choose_ai_move(self.ai_player, self.difficulty)
        if move is None or not self.apply_move(move):
            return None
        return move


def new_game(
    *,
    mode: GameMode = GameMode.HUMAN_VS_HUMAN,
    difficulty: Difficulty = Difficulty.BEGINNER,
    ai_player: Player = Player.WHITE,
) -> GameSession:
    return GameSession(mode=mode, difficulty=difficulty, ai_player=ai_player)


def legal_moves(session: GameSession) -> List[Coordinate]:
    return session.legal_moves()


def apply_move(session: GameSession, position: Coordinate) -> bool:
    return session.apply_move(position)


def is_game_over(session: GameSession) -> bool:
    return session.is_game_over


def winner(session: GameSession) -> Optional[Player]:
    return session.winner


def disc_counts(session: GameSession) -> Tuple[int, int]:
    return session.disc_counts()


def choose_ai_move(
    session: GameSession, player: Player, difficulty: Difficulty
) -> Optional[Coordinate]:
    return session.choose_ai_move(player, difficulty)

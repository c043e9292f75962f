from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .geometry import BOARD_SIZE, DIRECTIONS, Coordinate, all_coordinates
from .state import (
    BoolArray,
    CellType,
    GameResult,
    GameState,
    MoveRecord,
    Player,
    empty_board,
)

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    pass


def initialize_game_state() -> GameState:
    board = empty_board()

    # Two white and two black discs on the central diagonals.
    board[3, 3] = CellType.WHITE
    board[4, 4] = CellType.WHITE
    board[3, 4] = CellType.BLACK
    board[4, 3] = CellType.BLACK

    return GameState(board=board, current_player=Player.BLACK)


def captured_discs(state: GameState, position: Coordinate, mover: Player) -> List[Coordinate]:
    """Discs flipped if ``mover`` plays at ``position``.

    An empty list means the move is illegal. Rays are walked in ``DIRECTIONS``
    order and each ray's discs are listed from nearest to farthest.
    """
    board = state.board
    if board[position.row, position.col] != CellType.EMPTY:
        return []

    own = int(mover.cell)
    opponent = int(mover.opposite.cell)
    captures: List[Coordinate] = []
    for direction in DIRECTIONS:
        ray: List[Coordinate] = []
        r = position.row + direction.row_offset
        c = position.col + direction.col_offset
        while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
            occupant = board[r, c]
            if occupant == opponent:
                ray.append(Coordinate(r, c))
                r += direction.row_offset
                c += direction.col_offset
                continue
            if occupant == own:
                captures.extend(ray)
            break
        # hitting empty or the edge without an own disc captures nothing
    return captures


def is_legal(state: GameState, position: Coordinate, mover: Player) -> bool:
    return bool(captured_discs(state, position, mover))


def legal_moves(state: GameState, mover: Optional[Player] = None) -> List[Coordinate]:
    """All legal moves for ``mover`` in row-major order."""
    if mover is None:
        mover = state.current_player
    return [position for position in all_coordinates() if is_legal(state, position, mover)]


def has_legal_move(state: GameState, mover: Player) -> bool:
    return any(is_legal(state, position, mover) for position in all_coordinates())


def legal_move_mask(state: GameState, mover: Optional[Player] = None) -> BoolArray:
    mask = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)
    for position in legal_moves(state, mover):
        mask[position.row, position.col] = True
    return mask


def place_disc(state: GameState, position: Coordinate, mover: Player) -> List[Coordinate]:
    """Put a disc down and flip its captures, without touching the turn.

    Mutates ``state.board`` in place. Used directly when simulating moves
    on a copied state.
    """
    flipped = captured_discs(state, position, mover)
    if not flipped:
        raise IllegalMoveError(f"{mover.display_name} cannot play at {position.to_field()}.")

    state.board[position.row, position.col] = mover.cell
    for disc in flipped:
        state.board[disc.row, disc.col] = mover.cell
    return flipped


def final_result(state: GameState) -> GameResult:
    black, white = state.counts()
    if black > white:
        return GameResult.BLACK_WIN
    if white > black:
        return GameResult.WHITE_WIN
    return GameResult.DRAW


def apply_move(state: GameState, position: Coordinate, *, in_place: bool = False) -> GameState:
    target = state if in_place else state.copy()
    if target.is_terminal:
        raise IllegalMoveError("Cannot apply a move to a finished game.")

    mover = target.current_player
    flipped = place_disc(target, position, mover)
    target.ply_count += 1
    logger.debug(
        "%s played %s flipping %d disc(s)", mover.display_name, position.to_field(), len(flipped)
    )

    passed_player = _advance_turn(target, mover)

    target.last_move = MoveRecord(
        player=mover,
        position=position,
        flipped=tuple(flipped),
        passed_player=passed_player,
        resulted_in=target.result,
    )
    return target


def settle_turn(state: GameState) -> Optional[Player]:
    """Bring a hand-built state in line with the pass and game-over rules.

    Mutates ``state`` in place and returns the player skipped, if any.
    """
    if state.is_terminal or has_legal_move(state, state.current_player):
        return None
    return _advance_turn(state, state.current_player.opposite)


def _advance_turn(state: GameState, mover: Player) -> Optional[Player]:
    """Hand the turn on after ``mover`` has played.

    Returns the player skipped by a forced pass, if any.
    """
    opponent = mover.opposite
    if has_legal_move(state, opponent):
        state.current_player = opponent
        return None

    if has_legal_move(state, mover):
        state.current_player = mover
        state.pass_count += 1
        logger.debug("%s has no legal move and passes", opponent.display_name)
        return opponent

    state.current_player = mover
    state.result = final_result(state)
    black, white = state.counts()
    logger.info("Game over: %s (black=%d, white=%d)", state.result.value, black, white)
    return None

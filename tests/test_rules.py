import numpy as np
import pytest

from reversi.core import (
    CellType,
    Coordinate,
    GameResult,
    GameState,
    IllegalMoveError,
    Player,
    apply_move,
    captured_discs,
    initialize_game_state,
    is_legal,
    legal_move_mask,
    legal_moves,
    place_disc,
    settle_turn,
)


def fresh_state(current: Player = Player.BLACK) -> GameState:
    state = initialize_game_state()
    state.board[:, :] = CellType.EMPTY
    state.current_player = current
    return state


def pass_scenario_state() -> GameState:
    """Black can play at a1-row capture or h8; White can never move."""
    state = fresh_state()
    state.board[0, 0] = CellType.BLACK
    state.board[0, 1] = CellType.WHITE
    state.board[7, 0:6] = CellType.BLACK
    state.board[7, 6] = CellType.WHITE
    return state


def test_starting_position() -> None:
    state = initialize_game_state()
    assert state.current_player == Player.BLACK
    assert state.cell_at(Coordinate(3, 3)) == CellType.WHITE
    assert state.cell_at(Coordinate(4, 4)) == CellType.WHITE
    assert state.cell_at(Coordinate(3, 4)) == CellType.BLACK
    assert state.cell_at(Coordinate(4, 3)) == CellType.BLACK
    assert state.counts() == (2, 2)
    assert state.empty_count() == 60
    assert not state.is_terminal
    assert state.winner is None


def test_starting_legal_moves_row_major() -> None:
    state = initialize_game_state()
    assert legal_moves(state) == [
        Coordinate(2, 3),
        Coordinate(3, 2),
        Coordinate(4, 5),
        Coordinate(5, 4),
    ]
    assert legal_moves(state, Player.WHITE) == [
        Coordinate(2, 4),
        Coordinate(3, 5),
        Coordinate(4, 2),
        Coordinate(5, 3),
    ]


def test_legal_move_mask_matches_enumeration() -> None:
    state = initialize_game_state()
    mask = legal_move_mask(state)
    assert mask.shape == (8, 8)
    assert np.count_nonzero(mask) == 4
    for move in legal_moves(state):
        assert mask[move.row, move.col]


def test_capture_along_single_ray() -> None:
    state = fresh_state()
    state.board[3, 1] = CellType.BLACK
    state.board[3, 2] = CellType.WHITE
    state.board[3, 3] = CellType.WHITE

    assert captured_discs(state, Coordinate(3, 4), Player.BLACK) == [
        Coordinate(3, 3),
        Coordinate(3, 2),
    ]


def test_capture_along_several_rays() -> None:
    state = fresh_state()
    state.board[2, 2] = CellType.WHITE
    state.board[1, 1] = CellType.BLACK
    state.board[3, 2] = CellType.WHITE
    state.board[3, 1] = CellType.BLACK
    state.board[4, 3] = CellType.WHITE
    state.board[5, 3] = CellType.BLACK

    captured = captured_discs(state, Coordinate(3, 3), Player.BLACK)
    assert set(captured) == {Coordinate(2, 2), Coordinate(3, 2), Coordinate(4, 3)}


def test_ray_ending_at_edge_captures_nothing() -> None:
    state = fresh_state()
    state.board[3, 6] = CellType.WHITE
    state.board[3, 7] = CellType.WHITE

    assert captured_discs(state, Coordinate(3, 5), Player.BLACK) == []
    assert not is_legal(state, Coordinate(3, 5), Player.BLACK)


def test_ray_ending_at_empty_captures_nothing() -> None:
    state = fresh_state()
    state.board[3, 3] = CellType.WHITE
    state.board[3, 5] = CellType.BLACK  # gap at (3, 4)

    assert captured_discs(state, Coordinate(3, 2), Player.BLACK) == []


def test_occupied_square_is_never_legal() -> None:
    state = initialize_game_state()
    assert captured_discs(state, Coordinate(3, 3), Player.BLACK) == []
    assert not is_legal(state, Coordinate(3, 3), Player.BLACK)


def test_apply_move_flips_and_switches_turn() -> None:
    state = initialize_game_state()
    next_state = apply_move(state, Coordinate(2, 3))

    assert next_state.cell_at(Coordinate(2, 3)) == CellType.BLACK
    assert next_state.cell_at(Coordinate(3, 3)) == CellType.BLACK
    assert next_state.counts() == (4, 1)
    assert next_state.current_player == Player.WHITE
    assert next_state.ply_count == 1
    assert next_state.last_move is not None
    assert next_state.last_move.flipped == (Coordinate(3, 3),)
    assert next_state.last_move.passed_player is None
    # the input state is left alone unless in_place is requested
    assert state.counts() == (2, 2)
    assert state.current_player == Player.BLACK


def test_apply_move_in_place() -> None:
    state = initialize_game_state()
    result = apply_move(state, Coordinate(3, 2), in_place=True)
    assert result is state
    assert state.counts() == (4, 1)


def test_illegal_move_raises_and_leaves_state() -> None:
    state = initialize_game_state()
    before = state.board.copy()

    with pytest.raises(IllegalMoveError):
        apply_move(state, Coordinate(0, 0))

    assert np.array_equal(state.board, before)
    assert state.current_player == Player.BLACK


def test_place_disc_does_not_touch_turn() -> None:
    state = initialize_game_state()
    flipped = place_disc(state, Coordinate(2, 3), Player.BLACK)
    assert flipped == [Coordinate(3, 3)]
    assert state.current_player == Player.BLACK
    assert state.ply_count == 0

    with pytest.raises(IllegalMoveError):
        place_disc(state, Coordinate(7, 7), Player.BLACK)


def test_forced_pass_returns_turn_to_mover() -> None:
    state = pass_scenario_state()
    assert legal_moves(state, Player.BLACK) == [Coordinate(0, 2), Coordinate(7, 7)]
    assert legal_moves(state, Player.WHITE) == []

    next_state = apply_move(state, Coordinate(0, 2))

    assert not next_state.is_terminal
    assert next_state.current_player == Player.BLACK
    assert next_state.pass_count == 1
    assert next_state.last_move.passed_player == Player.WHITE


def test_game_over_when_neither_side_can_move() -> None:
    state = pass_scenario_state()
    state = apply_move(state, Coordinate(0, 2))
    state = apply_move(state, Coordinate(7, 7))

    assert state.is_terminal
    assert state.result == GameResult.BLACK_WIN
    assert state.winner == Player.BLACK
    assert state.counts() == (11, 0)
    assert state.last_move.resulted_in == GameResult.BLACK_WIN

    with pytest.raises(IllegalMoveError):
        apply_move(state, Coordinate(5, 5))


def test_full_board_tie_has_no_winner() -> None:
    state = fresh_state()
    state.board[:, :4] = CellType.BLACK
    state.board[:, 4:] = CellType.WHITE

    settle_turn(state)

    assert state.is_terminal
    assert state.result == GameResult.DRAW
    assert state.winner is None


def test_starved_board_winner_by_count() -> None:
    state = fresh_state()
    state.board[0, 0] = CellType.WHITE
    state.board[7, 7] = CellType.WHITE
    state.board[0, 7] = CellType.BLACK

    settle_turn(state)

    assert state.result == GameResult.WHITE_WIN
    assert state.winner == Player.WHITE


def test_settle_turn_passes_stuck_player() -> None:
    state = pass_scenario_state()
    state.current_player = Player.WHITE

    skipped = settle_turn(state)

    assert skipped == Player.WHITE
    assert state.current_player == Player.BLACK
    assert not state.is_terminal


def test_copy_is_independent() -> None:
    state = initialize_game_state()
    clone = state.copy()
    clone.board[0, 0] = CellType.BLACK
    clone.current_player = Player.WHITE

    assert state.board[0, 0] == CellType.EMPTY
    assert state.current_player == Player.BLACK


def test_render_marks_hints() -> None:
    state = initialize_game_state()
    text = state.render(legal_move_mask(state))
    lines = text.splitlines()
    assert lines[0] == "  a b c d e f g h"
    assert lines[3] == "3 . . . * . . . ."
    assert lines[4] == "4 . . * W B . . ."

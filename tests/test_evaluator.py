import math

import pytest

from reversi.ai import captured_value, cell_value, score_captures, score_move
from reversi.core import CellType, Coordinate, Player, initialize_game_state


@pytest.mark.parametrize(
    ["coord", "expected"],
    [
        pytest.param(Coordinate(0, 0), 0.8, id="corner-a1"),
        pytest.param(Coordinate(7, 0), 0.8, id="corner-a8"),
        pytest.param(Coordinate(0, 3), 0.4, id="edge"),
        pytest.param(Coordinate(6, 7), 0.4, id="edge-right"),
        pytest.param(Coordinate(4, 4), 0.0, id="interior"),
    ],
)
def test_cell_value(coord: Coordinate, expected: float) -> None:
    assert cell_value(coord) == pytest.approx(expected)


@pytest.mark.parametrize(
    ["coord", "expected"],
    [
        pytest.param(Coordinate(0, 7), 2.0, id="corner"),
        pytest.param(Coordinate(7, 3), 2.0, id="edge"),
        pytest.param(Coordinate(1, 1), 1.0, id="interior"),
    ],
)
def test_captured_value(coord: Coordinate, expected: float) -> None:
    assert captured_value(coord) == pytest.approx(expected)


def test_opening_move_scores_one_interior_capture() -> None:
    state = initialize_game_state()
    assert score_move(state, Coordinate(2, 3), Player.BLACK) == pytest.approx(1.0)


def test_illegal_move_scores_negative_infinity() -> None:
    state = initialize_game_state()
    assert score_move(state, Coordinate(0, 0), Player.BLACK) == -math.inf
    assert score_captures(Coordinate(0, 0), []) == -math.inf


def test_edge_placement_with_edge_captures() -> None:
    state = initialize_game_state()
    state.board[:, :] = CellType.EMPTY
    state.board[0, 1] = CellType.WHITE
    state.board[0, 2] = CellType.WHITE
    state.board[0, 3] = CellType.BLACK

    # corner placement plus two edge captures
    assert score_move(state, Coordinate(0, 0), Player.BLACK) == pytest.approx(0.8 + 2.0 + 2.0)

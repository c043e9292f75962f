from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .geometry import BOARD_SIZE, Coordinate

BoardArray = NDArray[np.int8]
BoolArray = NDArray[np.bool_]


class CellType(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2


class Player(IntEnum):
    BLACK = 1
    WHITE = 2

    @property
    def cell(self) -> CellType:
        return CellType(int(self))

    @property
    def opposite(self) -> "Player":
        return Player.WHITE if self == Player.BLACK else Player.BLACK

    @property
    def display_name(self) -> str:
        return "Black" if self == Player.BLACK else "White"


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WIN = "black_win"
    WHITE_WIN = "white_win"
    DRAW = "draw"


@dataclass(frozen=True)
class MoveRecord:
    player: Player
    position: Coordinate
    flipped: Tuple[Coordinate, ...] = ()
    passed_player: Optional[Player] = None
    resulted_in: GameResult = GameResult.ONGOING


@dataclass
class GameState:
    board: BoardArray  # shape (8, 8), dtype=np.int8, values 0 (empty), 1 (black), 2 (white)
    current_player: Player
    result: GameResult = GameResult.ONGOING
    ply_count: int = 0
    pass_count: int = 0
    last_move: Optional[MoveRecord] = None

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            result=self.result,
            ply_count=self.ply_count,
            pass_count=self.pass_count,
            last_move=self.last_move,
        )

    @property
    def is_terminal(self) -> bool:
        return self.result != GameResult.ONGOING

    @property
    def winner(self) -> Optional[Player]:
        if self.result == GameResult.BLACK_WIN:
            return Player.BLACK
        if self.result == GameResult.WHITE_WIN:
            return Player.WHITE
        return None

    def cell_at(self, position: Coordinate) -> CellType:
        return CellType(int(self.board[position.row, position.col]))

    def disc_count(self, cell: CellType) -> int:
        return int(np.count_nonzero(self.board == int(cell)))

    def counts(self) -> Tuple[int, int]:
        return self.disc_count(CellType.BLACK), self.disc_count(CellType.WHITE)

    def empty_count(self) -> int:
        return self.disc_count(CellType.EMPTY)

    def render(self, hints: Optional[BoolArray] = None) -> str:
        symbols = {CellType.EMPTY: ".", CellType.BLACK: "B", CellType.WHITE: "W"}
        rows = ["  " + " ".join("abcdefgh"[:BOARD_SIZE])]
        for r in range(BOARD_SIZE):
            cells = []
            for c in range(BOARD_SIZE):
                cell = CellType(int(self.board[r, c]))
                if cell == CellType.EMPTY and hints is not None and hints[r, c]:
                    cells.append("*")
                else:
                    cells.append(symbols[cell])
            rows.append(f"{r + 1} " + " ".join(cells))
        return "\n".join(rows)

    def __repr__(self) -> str:
        black, white = self.counts()
        return (
            f"GameState(current={self.current_player.name}, result={self.result.value}, "
            f"ply={self.ply_count}, black={black}, white={white})\n"
            f"{self.render()}"
        )


def empty_board() -> BoardArray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

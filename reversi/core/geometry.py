from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

BOARD_SIZE = 8
CORNERS: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (0, BOARD_SIZE - 1),
    (BOARD_SIZE - 1, 0),
    (BOARD_SIZE - 1, BOARD_SIZE - 1),
)
COLUMN_LETTERS = "abcdefgh"


class InvalidCoordinateError(ValueError):
    pass


@dataclass(frozen=True)
class Direction:
    row_offset: int
    col_offset: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row_offset, self.col_offset)


# NW, N, NE, W, E, SW, S, SE
DIRECTIONS: Tuple[Direction, ...] = tuple(
    Direction(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not Coordinate.is_on_board(self.row, self.col):
            raise InvalidCoordinateError(f"Coordinate ({self.row},{self.col}) is off the board.")

    @staticmethod
    def is_on_board(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def shifted(self, direction: Direction, distance: int = 1) -> Optional["Coordinate"]:
        row = self.row + direction.row_offset * distance
        col = self.col + direction.col_offset * distance
        if not Coordinate.is_on_board(row, col):
            return None
        return Coordinate(row, col)

    @property
    def is_corner(self) -> bool:
        return (self.row, self.col) in CORNERS

    @property
    def is_edge(self) -> bool:
        last = BOARD_SIZE - 1
        return self.row in (0, last) or self.col in (0, last)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def to_index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    @staticmethod
    def from_index(index: int) -> "Coordinate":
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise InvalidCoordinateError(f"Index {index} out of range.")
        return Coordinate(index // BOARD_SIZE, index % BOARD_SIZE)

    def to_field(self) -> str:
        return f"{COLUMN_LETTERS[self.col]}{self.row + 1}"

    @staticmethod
    def from_field(field: str) -> "Coordinate":
        field = field.strip().lower()
        if len(field) != 2:
            raise InvalidCoordinateError(f'Invalid field "{field}"')
        letter, digit = field[0], field[1]
        if letter not in COLUMN_LETTERS or not "1" <= digit <= "8":
            raise InvalidCoordinateError(f'Invalid field "{field}"')
        return Coordinate(int(digit) - 1, COLUMN_LETTERS.index(letter))

    def __repr__(self) -> str:
        return f"Coordinate({self.row}, {self.col})"


def all_coordinates() -> Iterator[Coordinate]:
    """Yield every square in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Coordinate(row, col)

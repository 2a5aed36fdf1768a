"""Board coordinates, sides and cursor directions.

Files and ranks are zero-based: file 0 is the a-file, rank 0 is the first
rank, so ``Square(4, 1)`` is e2.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BOARD_SIZE = 8
FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


class Side(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Direction(IntEnum):
    """Cursor movement direction as seen from White's side of the board."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """``(file, rank)`` offset for one step."""
        return _DIRECTION_DELTA[self]


_DIRECTION_DELTA: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A board coordinate. Equality is by value only."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE):
            raise ValueError(f"Square out of bounds: ({self.file}, {self.rank})")

    @property
    def name(self) -> str:
        return FILE_NAMES[self.file] + RANK_NAMES[self.rank]

    def shifted(self, direction: Direction) -> Square:
        """Neighbour in *direction*, or ``self`` when that would leave the board."""
        df, dr = direction.delta
        file = min(max(self.file + df, 0), BOARD_SIZE - 1)
        rank = min(max(self.rank + dr, 0), BOARD_SIZE - 1)
        return Square(file, rank)

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> Square(4, 3)."""
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(FILE_NAMES.index(name[0]), RANK_NAMES.index(name[1]))


@dataclass(frozen=True, slots=True)
class Move:
    """A move attempt: origin and destination squares."""

    origin: Square
    destination: Square

    @classmethod
    def from_names(cls, origin: str, destination: str) -> Move:
        return cls(parse_square(origin), parse_square(destination))

    def __str__(self) -> str:
        return f"{self.origin.name}{self.destination.name}"


# ── Named square constants ──────────────────────────────────────────────────
A1 = Square(0, 0)
E2 = parse_square("e2")
E4 = parse_square("e4")
E5 = parse_square("e5")
H8 = Square(7, 7)

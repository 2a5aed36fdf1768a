"""Board cursor: the highlighted square driven by directional keys."""

from __future__ import annotations

from chessterm.core.types import A1, Direction, Square


class Cursor:
    """A single square on the board that moves one step at a time.

    Moving off an edge leaves the cursor where it is.
    """

    __slots__ = ("_position",)

    def __init__(self, start: Square = A1) -> None:
        self._position = start

    @property
    def position(self) -> Square:
        return self._position

    def move(self, direction: Direction) -> bool:
        """Step in *direction*. Returns ``True`` if the cursor changed square."""
        target = self._position.shifted(direction)
        if target == self._position:
            return False
        self._position = target
        return True

    def reset(self, start: Square = A1) -> None:
        self._position = start

"""Status line with a short trailing history."""

from __future__ import annotations

from collections import deque

DEFAULT_HISTORY_SIZE = 5


class StatusLog:
    """Latest outcome message plus the last *capacity* messages.

    ``set`` overwrites the latest message; the history drops its oldest
    entry once full.
    """

    __slots__ = ("_latest", "_history")

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._latest = ""
        self._history: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._history.maxlen or 0

    def set(self, message: str) -> None:
        self._latest = message
        self._history.append(message)

    def latest(self) -> str:
        return self._latest

    def history(self) -> tuple[str, ...]:
        """Retained messages, oldest first."""
        return tuple(self._history)

    def clear(self) -> None:
        self._latest = ""
        self._history.clear()

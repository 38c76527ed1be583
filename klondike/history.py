"""Bounded undo history."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from .state import GameState

DEFAULT_HISTORY_LIMIT = 10


class History:
    """LIFO buffer of prior game states, keeping only the most recent ``capacity`` entries.

    States are immutable, so a stored snapshot can never be altered by later play.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_LIMIT) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self.capacity = capacity
        self._snapshots: Deque[GameState] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def can_undo(self) -> bool:
        return bool(self._snapshots)

    def save(self, state: GameState) -> None:
        self._snapshots.append(state)

    def undo(self) -> Optional[GameState]:
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def clear(self) -> None:
        self._snapshots.clear()

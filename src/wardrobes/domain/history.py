"""Bounded undo/redo stacks of immutable snapshots."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_HISTORY_LIMIT = 20


class SnapshotHistory(Generic[T]):
    """Undo and redo stacks holding at most ``limit`` snapshots each.

    Snapshots are pushed before a change is applied. Recording a new
    snapshot clears the redo stack; once full, the oldest snapshot is
    discarded.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._limit = limit
        self._undo: deque[T] = deque(maxlen=limit)
        self._redo: deque[T] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def record(self, snapshot: T) -> None:
        """Push the state from before a change and clear the redo stack."""
        self._undo.append(snapshot)
        self._redo.clear()

    def undo(self, current: T) -> T | None:
        """Pop the previous state, keeping ``current`` for redo.

        Returns:
            The snapshot to restore, or None when there is nothing to undo.
        """
        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: T) -> T | None:
        """Pop the next state, keeping ``current`` for undo.

        Returns:
            The snapshot to restore, or None when there is nothing to redo.
        """
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def copy(self) -> SnapshotHistory[T]:
        """Independent history sharing the (immutable) snapshots."""
        other: SnapshotHistory[T] = SnapshotHistory(self._limit)
        other._undo.extend(self._undo)
        other._redo.extend(self._redo)
        return other

"""Selectable list of status entries with a cursor that survives refreshes."""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class StatusList(Generic[T]):
    """Ordered entries plus an optional cursor.

    The cursor is either a valid index into ``entries`` or ``None``; an empty
    list never has a cursor.
    """

    def __init__(self, entries: Iterable[T] = (), cursor: Optional[int] = None) -> None:
        self._entries: List[T] = list(entries)
        self._cursor: Optional[int] = None
        if cursor is not None and self._entries:
            self._cursor = min(max(cursor, 0), len(self._entries) - 1)

    @classmethod
    def with_items(cls, entries: Iterable[T]) -> "StatusList[T]":
        items = list(entries)
        return cls(items, 0 if items else None)

    @property
    def entries(self) -> List[T]:
        return list(self._entries)

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def refresh(self, entries: Iterable[T]) -> None:
        """Replace the entries, clamping the cursor to the new length."""
        self._entries = list(entries)
        if not self._entries:
            self._cursor = None
        elif self._cursor is not None:
            self._cursor = min(self._cursor, len(self._entries) - 1)

    def current(self) -> Optional[T]:
        if self._cursor is None:
            return None
        return self._entries[self._cursor]

    def move_next(self) -> None:
        if not self._entries:
            return
        if self._cursor is None or self._cursor >= len(self._entries) - 1:
            self._cursor = 0
        else:
            self._cursor += 1

    def move_previous(self) -> None:
        if not self._entries:
            return
        if self._cursor is None:
            self._cursor = 0
        elif self._cursor == 0:
            self._cursor = len(self._entries) - 1
        else:
            self._cursor -= 1

    def clear_selection(self) -> None:
        self._cursor = None

    def __repr__(self) -> str:
        return f"StatusList(len={len(self._entries)}, cursor={self._cursor})"

"""Clamped cursor navigation over a match store."""

from __future__ import annotations

from .errors import SelectionError
from .records import MatchRecord
from .store import MatchStore


class SelectionEngine:
    """Own the cursor into a non-empty ``MatchStore``.

    Every move clamps to ``[0, count - 1]``; nothing wraps and nothing raises.
    ``top`` is the first visible row, kept in sync by ``scroll_into_view``.
    """

    def __init__(self, store: MatchStore, page_size: int = 1) -> None:
        if not store:
            raise SelectionError("internal error: no matches to select from")
        self.store = store
        self.cursor = 0
        self.top = 0
        self._page_size = max(1, page_size)

    @property
    def count(self) -> int:
        return len(self.store)

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        self._page_size = max(1, value)

    def _clamp(self, index: int) -> int:
        return max(0, min(index, self.count - 1))

    def move_down(self) -> None:
        self.cursor = self._clamp(self.cursor + 1)

    def move_up(self) -> None:
        self.cursor = self._clamp(self.cursor - 1)

    def page_down(self) -> None:
        self.cursor = self._clamp(self.cursor + self._page_size)

    def page_up(self) -> None:
        self.cursor = self._clamp(self.cursor - self._page_size)

    def current(self) -> MatchRecord:
        if not 0 <= self.cursor < self.count:
            raise SelectionError(f"internal error: no entry associated with selection {self.cursor}")
        return self.store[self.cursor]

    def scroll_into_view(self, visible_rows: int | None = None) -> bool:
        """Move ``top`` minimally so the cursor row is visible.

        Returns whether ``top`` changed.
        """
        rows = self._page_size if visible_rows is None else max(1, visible_rows)
        previous = self.top
        if self.cursor < self.top:
            self.top = self.cursor
        elif self.cursor >= self.top + rows:
            self.top = self.cursor - rows + 1
        self.top = max(0, min(self.top, max(0, self.count - rows)))
        return self.top != previous

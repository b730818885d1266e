"""
Session-local meme history.

An append-only list of fetched memes plus a cursor. The cursor is ``None``
until the first meme arrives; afterwards it always points at an existing
entry. Nothing here is persisted.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from devlife.core.dto.meme import MemeDTO
from devlife.core.errors import HistoryError

logger = logging.getLogger(__name__)


class SessionHistory:
    """Ordered memes seen this session and the index of the one on screen."""

    def __init__(self):
        self._items: List[MemeDTO] = []
        self._cursor: Optional[int] = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MemeDTO]:
        return iter(list(self._items))

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return self._cursor is None

    @property
    def current(self) -> Optional[MemeDTO]:
        if self._cursor is None:
            return None
        return self._items[self._cursor]

    @property
    def can_go_back(self) -> bool:
        return self._cursor is not None and self._cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self._cursor is not None and self._cursor < len(self._items) - 1

    def append(self, item: MemeDTO) -> MemeDTO:
        """Add a freshly fetched meme and move the cursor onto it."""
        self._items.append(item)
        self._cursor = len(self._items) - 1
        logger.debug("History append: id=%s cursor=%s", item.id, self._cursor)
        return item

    def step_forward(self) -> MemeDTO:
        """Replay the next already-fetched meme."""
        if not self.can_go_forward:
            raise HistoryError(f"cannot step forward from cursor {self._cursor} of {len(self._items)}")
        self._cursor += 1
        return self._items[self._cursor]

    def step_back(self) -> MemeDTO:
        """Return to the previous meme."""
        if not self.can_go_back:
            raise HistoryError(f"cannot step back from cursor {self._cursor}")
        self._cursor -= 1
        return self._items[self._cursor]

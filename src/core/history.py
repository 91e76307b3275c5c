"""Small in-memory history of generated images with LRU eviction.

Items are keyed by id; reading an item marks it as recently used and the
least recently used entries are evicted when maxsize is exceeded. Listing is
by creation time, independent of use. Nothing is persisted.
"""

from __future__ import annotations

import itertools
import uuid
from collections import OrderedDict
from typing import Dict, List, Optional

from core.models import HistoryItem


def new_history_id() -> str:
    return uuid.uuid4().hex[:12]


class HistoryStore:
    # Bounded history using OrderedDict (least recently used first)
    def __init__(self, *, maxsize: int = 50) -> None:
        self._maxsize = max(1, int(maxsize))
        self._store: "OrderedDict[str, HistoryItem]" = OrderedDict()
        # Tie-breaker for items created within the same clock tick
        self._seq = itertools.count()
        self._added: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._store)

    def get(self, item_id: str) -> Optional[HistoryItem]:
        item = self._store.get((item_id or "").strip())
        if item is None:
            return None

        # Move to end to mark as recently used
        self._store.move_to_end(item.id, last=True)
        return item

    def add(self, item: HistoryItem) -> None:
        self._store[item.id] = item
        self._store.move_to_end(item.id, last=True)
        self._added[item.id] = next(self._seq)

        # Evict least recently used entries while over maxsize
        while len(self._store) > self._maxsize:
            evicted, _ = self._store.popitem(last=False)
            self._added.pop(evicted, None)

    def list(self) -> List[HistoryItem]:
        """Items newest first, by creation time."""
        return sorted(
            self._store.values(),
            key=lambda item: (item.created_at, self._added[item.id]),
            reverse=True,
        )

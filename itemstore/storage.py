import threading
from typing import Optional

from itemstore.schemas import Item


class ItemStore:
    """In-memory mapping from item id to Item.

    Every operation runs under one exclusive lock. Records are copied on the
    way in and out so nothing outside the store can mutate a stored item.
    """

    def __init__(self):
        self._items: dict[str, Item] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._items)

    def list(self):
        with self._lock:
            return [item.model_copy() for item in self._items.values()]

    def get(self, item_id: str) -> Optional[Item]:
        with self._lock:
            item = self._items.get(item_id)
            return item.model_copy() if item is not None else None

    def put(self, item_id: str, item: Item) -> None:
        with self._lock:
            self._items[item_id] = item.model_copy()

    def delete(self, item_id: str) -> bool:
        with self._lock:
            return self._items.pop(item_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

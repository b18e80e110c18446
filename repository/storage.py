from threading import Lock
from typing import Dict, Generic, List, Optional, TypeVar

V = TypeVar("V")


class StorageMap(Generic[V]):
    """
    In-memory mapping from integer id to entity.

    Every operation holds the map's lock, so a reader never sees a
    half-applied insert and two inserts for the same id cannot both win.
    Iteration order is insertion order.
    """

    def __init__(self) -> None:
        self._items: Dict[int, V] = {}
        self._lock = Lock()

    def insert_if_absent(self, key: int, value: V) -> bool:
        with self._lock:
            if key in self._items:
                return False
            self._items[key] = value
            return True

    def get(self, key: int) -> Optional[V]:
        with self._lock:
            return self._items.get(key)

    def values(self) -> List[V]:
        with self._lock:
            return list(self._items.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

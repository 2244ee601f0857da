"""
Design (repository.py)
- Purpose: In-process ShopStore used by --memory mode and tests; behaves like the hosted table
           (store-assigned ids and timestamps, newest-first listing).
- Inputs: name/color on insert, id on delete.
- Outputs: Copies of the stored Shop records.
- Side effects: Mutates internal dict; stamps created_at with the current UTC time.
- Thread-safety: All methods take the internal lock.
"""

import threading
from datetime import datetime, timezone
from typing import Dict

from .models import Shop


class MemoryShopStore:
    """
    Design (MemoryShopStore)
    - State:
        _shops: {id -> Shop}
        _next_id: next id to assign (starts at 1, never reused)
        _lock: threading.Lock protecting both
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._shops: Dict[int, Shop] = {}
        self._next_id = 1

    def list(self) -> list[Shop]:
        """All shops, newest first (higher id wins when timestamps tie)."""
        with self._lock:
            shops = list(self._shops.values())
        return sorted(shops, key=lambda s: (s.created_at, s.id), reverse=True)

    def insert(self, name: str, favorite_color: str) -> None:
        with self._lock:
            shop = Shop(
                name=name,
                favorite_color=favorite_color,
                id=self._next_id,
                created_at=datetime.now(timezone.utc),
            )
            self._shops[shop.id] = shop
            self._next_id += 1

    def delete_by_id(self, shop_id: int) -> None:
        """Remove the shop if present; absent ids are a no-op, as with the hosted table."""
        with self._lock:
            self._shops.pop(shop_id, None)

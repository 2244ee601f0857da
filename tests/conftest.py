"""Shared fixtures: a recording in-memory store and a controller wired to mock callbacks."""
from unittest.mock import Mock

import pytest

from shopcolor.controller import ShopListController
from shopcolor.errors import StoreOperationFailed
from shopcolor.repository import MemoryShopStore


class RecordingStore(MemoryShopStore):
    """MemoryShopStore that records calls and can be told to fail per operation."""

    def __init__(self):
        super().__init__()
        self.calls = []
        self.fail = set()
        self.on_call = None

    def _record(self, operation, *args):
        self.calls.append((operation, *args))
        if self.on_call is not None:
            self.on_call(operation)
        if operation in self.fail:
            raise StoreOperationFailed("simulated failure", f"{operation} is down", operation=operation)

    def list(self):
        self._record("list")
        return super().list()

    def insert(self, name, favorite_color):
        self._record("insert", name, favorite_color)
        super().insert(name, favorite_color)

    def delete_by_id(self, shop_id):
        self._record("delete", shop_id)
        super().delete_by_id(shop_id)

    def seed(self, *pairs):
        """Insert rows directly, bypassing the call log."""
        for name, color in pairs:
            MemoryShopStore.insert(self, name, color)


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def callbacks():
    return Mock(on_change=Mock(), show_notice=Mock(), notify_failure=Mock())


@pytest.fixture
def controller(store, callbacks):
    return ShopListController(
        store,
        on_change=callbacks.on_change,
        show_notice=callbacks.show_notice,
        notify_failure=callbacks.notify_failure,
    )

"""
Design (controller.py)
- Purpose: Own the UI-facing state (shops, form inputs, busy flag) and sequence calls to the ShopStore.
- Inputs: A ShopStore (constructor-injected) and optional callbacks:
    on_change():                       state changed; presentation should repaint
    show_notice(message):              blocking, user-visible notice (validation, failed add)
    notify_failure(title, message):    non-blocking desktop notification (failed delete)
- Outputs: Operations return True when their store call succeeded.
- Side effects: Store calls; logging; callbacks.
- Flow: Every mutation is followed by a full resync (load) inside the same busy period,
        so `shops` is always a copy of the store's last answer.
- Thread-safety: The busy flag is the admission check; it is tested-and-set under _lock, so at most
                 one operation is in flight regardless of which thread calls. Read state via snapshot().
"""

import logging
import threading
from typing import Callable, Optional

from .config import ADD_FAILED_NOTICE, CONFIRM_KEYS
from .errors import ControllerBusy, InvalidInput, StoreOperationFailed
from .models import Shop, validate_shop_input
from .store import ShopStore

log = logging.getLogger(__name__)


class ShopListController:
    """
    Design (ShopListController)
    - State:
        shops: list[Shop] in store order (newest first)
        name_input, color_input: current text-field contents
        busy: True while a store call is in flight (idle <-> busy are the only states)
    """

    def __init__(
        self,
        store: ShopStore,
        on_change: Optional[Callable[[], None]] = None,
        show_notice: Optional[Callable[[str], None]] = None,
        notify_failure: Optional[Callable[[str, str], None]] = None,
    ):
        self.store = store
        self.on_change = on_change
        self.show_notice = show_notice
        self.notify_failure = notify_failure

        self._lock = threading.Lock()
        self.shops: list[Shop] = []
        self.name_input = ""
        self.color_input = ""
        self.busy = False

    # -------- read side --------

    @property
    def count(self) -> int:
        with self._lock:
            return len(self.shops)

    def snapshot(self) -> tuple[list[Shop], bool]:
        """Copy of (shops, busy) for the presentation thread."""
        with self._lock:
            return list(self.shops), self.busy

    def inputs(self) -> tuple[str, str]:
        """Current (name_input, color_input) read under the lock."""
        with self._lock:
            return self.name_input, self.color_input

    def set_inputs(self, name: str | None = None, color: str | None = None) -> None:
        """Mirror the text fields; None leaves a field as is."""
        with self._lock:
            if name is not None:
                self.name_input = name
            if color is not None:
                self.color_input = color

    # -------- operations --------

    def load_all(self) -> bool:
        """Replace `shops` with the store's list. On failure the old list stays and the error is logged."""
        try:
            self._begin("load")
        except ControllerBusy:
            return False
        try:
            return self._resync()
        finally:
            self._end()

    def add_shop(self, name: str | None = None, color: str | None = None) -> bool:
        """
        Insert a shop, then resync. Defaults to the current form inputs.
        Empty input: notice, no store call. Store failure: notice, inputs kept.
        """
        if name is None or color is None:
            with self._lock:
                name = self.name_input if name is None else name
                color = self.color_input if color is None else color
        try:
            name, color = validate_shop_input(name, color)
        except InvalidInput as exc:
            log.info("Rejected shop input: %s", exc)
            self._notice(str(exc))
            return False

        try:
            self._begin("add")
        except ControllerBusy:
            return False
        try:
            try:
                self.store.insert(name, color)
            except StoreOperationFailed as exc:
                self._log_failure("inserting data", exc)
                self._notice(ADD_FAILED_NOTICE)
                return False
            log.info("Added %s with color %s", name, color)
            with self._lock:
                self.name_input = ""
                self.color_input = ""
            self._changed()
            self._resync()
            return True
        finally:
            self._end()

    def delete_shop(self, shop_id: int | None) -> bool:
        """Delete by id, then resync. Failures are logged and raised as a desktop notification."""
        if shop_id is None:
            log.warning("Delete requested for a shop without an id; ignored")
            return False
        try:
            self._begin("delete")
        except ControllerBusy:
            return False
        try:
            try:
                self.store.delete_by_id(shop_id)
            except StoreOperationFailed as exc:
                self._log_failure("deleting shop", exc)
                if self.notify_failure is not None:
                    self.notify_failure("Delete failed", f"Could not delete shop {shop_id}: {exc.message or 'No message'}")
                return False
            log.info("Deleted shop with id %s", shop_id)
            self._resync()
            return True
        finally:
            self._end()

    def submit_on_enter(self, key: str) -> bool:
        """Map the confirm key to add_shop(); any other key is a no-op returning False."""
        if key not in CONFIRM_KEYS:
            return False
        return self.add_shop()

    # -------- internals --------

    def _begin(self, operation: str) -> None:
        with self._lock:
            if self.busy:
                log.warning("Ignoring %s: another store operation is in flight", operation)
                raise ControllerBusy(operation)
            self.busy = True
        self._changed()

    def _end(self) -> None:
        with self._lock:
            self.busy = False
        self._changed()

    def _resync(self) -> bool:
        """Fetch the full list; caller holds the busy flag."""
        try:
            shops = self.store.list()
        except StoreOperationFailed as exc:
            self._log_failure("fetching data", exc)
            return False
        log.info("Fetched %d shops", len(shops))
        with self._lock:
            self.shops = list(shops or [])
        self._changed()
        return True

    def _log_failure(self, action: str, exc: StoreOperationFailed) -> None:
        log.error("Error %s: %s | %s", action, exc.message or "No message", exc.details or "No details")

    def _notice(self, message: str) -> None:
        if self.show_notice is not None:
            self.show_notice(message)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

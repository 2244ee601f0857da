"""
Background task runner.

Design:
- Store calls block on the network, so each controller operation runs in its own daemon thread
  and the Tk main loop stays responsive.
- When the call returns, `on_done(result)` is posted back through `schedule` (Tk's after(0, ...)),
  so UI code only ever runs on the main thread.
- The controller's busy flag keeps this at one store call in flight; the runner does no queuing.
- An exception escaping the task is logged with its traceback and reported as result None.
"""

import logging
import threading
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)


class BackgroundTask:
    def __init__(self, target: Callable[..., Any], *args: Any,
                 schedule: Callable[[Callable[[], None]], None],
                 on_done: Optional[Callable[[Any], None]] = None, name: str = "store-call"):
        self.target = target
        self.args = args
        self.schedule = schedule
        self.on_done = on_done
        self.result: Any = None
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> "BackgroundTask":
        self._thread.start()
        return self

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def _run(self) -> None:
        try:
            self.result = self.target(*self.args)
        except Exception:
            log.exception("Background task %s failed", self._thread.name)
            self.result = None
        if self.on_done is not None:
            result = self.result
            self.schedule(lambda: self.on_done(result))

# backend/student_records/client/debounce.py
import threading
from typing import Callable


class Debouncer:
    """Run the most recent call once input has been quiet for `delay` seconds."""

    def __init__(self, delay: float):
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[Callable, tuple] | None = None

    def call(self, fn: Callable, *args) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (fn, args)
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def _take(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            pending, self._pending, self._timer = self._pending, None, None
        return pending

    def _fire(self) -> None:
        pending = self._take()
        if pending:
            fn, args = pending
            fn(*args)

    def flush(self) -> None:
        """Run the pending call now instead of waiting"""
        self._fire()

    def cancel(self) -> None:
        self._take()

    @property
    def pending(self) -> bool:
        return self._pending is not None

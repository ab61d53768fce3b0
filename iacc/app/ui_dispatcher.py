"""Completion contexts that decide which thread delivers item results.

Adaptors receive one of these at construction and route every completion
through ``dispatch``. The Tk shell uses ``MainThreadContext`` with the root
window's ``after`` so callbacks fired by worker threads are replayed on the
UI thread; tests use ``ImmediateContext``.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional


ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]


class ImmediateContext:
    """Run callbacks inline on whatever thread calls ``dispatch``."""

    def dispatch(self, callback: Callable[[], None]) -> None:
        callback()


class MainThreadContext:
    """Deliver callbacks on the owner (UI) thread.

    Calls made on the owner thread run inline. Calls from any other thread
    are queued and drained by ``pump``, which ``start`` keeps rescheduling
    through the injected Tk-style ``after`` function.
    """

    def __init__(
        self,
        schedule: Optional[ScheduleFn] = None,
        cancel: Optional[CancelFn] = None,
        *,
        interval_ms: int = 15,
        owner: Optional[threading.Thread] = None,
    ) -> None:
        """Bind the UI scheduler and capture the owner thread.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
            interval_ms: Delay between queue drains.
            owner: Thread treated as the UI thread; defaults to the caller.
        """
        self._log = logging.getLogger(__name__)
        self._schedule = schedule
        self._cancel = cancel
        self._interval_ms = max(1, int(interval_ms))
        self._owner = owner or threading.current_thread()
        self._pending: "queue.Queue[Callable[[], None]]" = queue.Queue()
        self._token: Optional[str] = None

    @property
    def pending(self) -> int:
        return self._pending.qsize()

    def is_owner_thread(self) -> bool:
        return threading.current_thread() is self._owner

    def dispatch(self, callback: Callable[[], None]) -> None:
        if self.is_owner_thread():
            callback()
            return
        self._pending.put(callback)

    def pump(self) -> int:
        """Run every queued callback on the calling thread; return the count."""
        ran = 0
        while True:
            try:
                callback = self._pending.get_nowait()
            except queue.Empty:
                return ran
            try:
                callback()
            except Exception:
                self._log.exception("Dispatched callback failed")
            ran += 1

    def start(self) -> None:
        """Begin periodic draining via the injected scheduler."""
        if self._schedule is None:
            raise RuntimeError("MainThreadContext.start requires a schedule function")
        self._token = self._schedule(self._interval_ms, self._tick)

    def stop(self) -> None:
        token, self._token = self._token, None
        if token is None or self._cancel is None:
            return
        self._cancel(token)

    def _tick(self) -> None:
        self.pump()
        if self._schedule is not None and self._token is not None:
            self._token = self._schedule(self._interval_ms, self._tick)


__all__ = ["ImmediateContext", "MainThreadContext"]

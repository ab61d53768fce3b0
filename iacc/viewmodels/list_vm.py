"""Load/refresh lifecycle for one list screen.

Call context:
    ``ListComposer`` builds one ``ListVM`` per list with its composed
    ``ItemService``; ``ListView`` calls ``on_appear``, ``refresh`` and
    ``select`` and renders through the ``on_*`` callbacks.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from iacc.domain.ports import ItemService
from iacc.domain.result import Result
from iacc.usecases.error_mapping import map_load_error

from .item_vm import ItemViewModel


class ListState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR_SHOWN = "error_shown"


class ListVM:
    """Owns the displayed items and drives loads through one ``ItemService``.

    At most one load is in flight; a trigger while loading is ignored.
    Success replaces ``items`` wholesale, failure keeps them untouched.
    There is no cancellation: after ``detach`` the chain still runs and the
    controller stays ``LOADING`` until its result arrives and is dropped, so
    a detached controller never has two chains in flight.
    """

    def __init__(
        self,
        service: ItemService,
        *,
        title: str = "",
        on_items_changed: Optional[Callable[[List[ItemViewModel]], None]] = None,
        on_refreshing: Optional[Callable[[bool], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Bind the item source and the view callbacks.

        Args:
            service: Composed item source, held for the VM's lifetime.
            title: Screen title shown by the view.
            on_items_changed: Called with the new rows after a successful load.
            on_refreshing: Called with ``True`` when a load starts and
                ``False`` when it ends.
            on_error: Called with a user-facing message when a load fails.
        """
        self._log = logging.getLogger(__name__)
        self.service = service
        self.title = title
        self.on_items_changed = on_items_changed
        self.on_refreshing = on_refreshing
        self.on_error = on_error

        self.items: List[ItemViewModel] = []
        self.state = ListState.IDLE
        self.last_error: Optional[str] = None
        self._load_seq = 0
        self._inflight: Optional[int] = None
        self._orphaned: Optional[int] = None

    @property
    def is_loading(self) -> bool:
        return self.state is ListState.LOADING

    def on_appear(self) -> bool:
        """Load only when nothing is displayed yet. Returns whether it loaded."""
        if self.items:
            return False
        return self.refresh()

    def refresh(self) -> bool:
        """Start a load unless one is already running. Returns whether it started."""
        if self.is_loading:
            self._log.debug("%s: refresh ignored, load already in flight", self.title or "list")
            return False
        self._load_seq += 1
        seq = self._inflight = self._load_seq
        self.state = ListState.LOADING
        if self.on_refreshing:
            self.on_refreshing(True)
        self.service.load_items(lambda result: self._handle_result(seq, result))
        return True

    def detach(self) -> None:
        """Stop listening for the in-flight load (screen went away)."""
        if self._inflight is not None:
            self._log.debug("%s: detached with a load in flight", self.title or "list")
            self._orphaned = self._inflight
        self._inflight = None

    def select(self, index: int) -> None:
        if index < 0 or index >= len(self.items):
            raise IndexError(f"No item at row {index}")
        self.items[index].select()

    def rows(self) -> List[Tuple[str, str]]:
        return [(item.title, item.subtitle) for item in self.items]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _handle_result(self, seq: int, result: Result[List[ItemViewModel]]) -> None:
        if seq != self._inflight:
            self._log.debug("%s: dropping result of load #%d", self.title or "list", seq)
            if seq == self._orphaned:
                self._orphaned = None
                self.state = ListState.IDLE
            return
        self._inflight = None

        if result.is_success:
            self.items = list(result.value)
            self.last_error = None
            self.state = ListState.IDLE
            if self.on_refreshing:
                self.on_refreshing(False)
            if self.on_items_changed:
                self.on_items_changed(self.items)
            return

        err = map_load_error(result.error, list_name=self.title or None)
        self._log.warning("%s load failed (%s): %s", self.title or "list", err.code, result.error)
        self.last_error = err.message
        self.state = ListState.ERROR_SHOWN
        if self.on_error:
            self.on_error(err.message)
        if self.on_refreshing:
            self.on_refreshing(False)


__all__ = ["ListState", "ListVM"]

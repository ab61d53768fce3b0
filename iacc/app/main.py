# iacc/app/main.py
from __future__ import annotations

import logging
import os
from tkinter import messagebox
from typing import Dict, Optional

from ..adapters.api_mock import (
    CardAPIMock,
    FriendsAPIMock,
    TransfersAPIMock,
    demo_cards,
    demo_friends,
    demo_transfers,
)
from ..adapters.friends_cache_local import FriendsCacheLocal
from ..adapters.list_rest import ListRestAdapter
from ..adapters.settings_local import SettingsLocal
from ..domain.models import Card, Friend, Transfer, User
from ..utils import logging as logging_utils
from ..viewmodels.item_vm import format_amount, format_long_date
from ..viewmodels.list_vm import ListVM
from ..viewmodels.settings_vm import SettingsVM
from .composition import ListComposer, SelectionHooks
from .ui_dispatcher import MainThreadContext
from .views.list_view import ListView
from .views.main_window import MainWindowView

logging_utils.configure_root()


class App:
    """Bootstrap: wire list views <-> list VMs and the composed item services."""

    def __init__(self, settings_vm: Optional[SettingsVM] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm or self._load_settings()
        logging_utils.apply_preferences(self.settings_vm.debug_logging)

        self.win = MainWindowView()
        self.context = MainThreadContext(self.win.after, self.win.after_cancel)

        self._rest: Optional[ListRestAdapter] = None
        composer = self._build_composer()
        self.lists: Dict[str, ListVM] = composer.compose_tabs()

        hosts = {
            "Friends": self.win.tab_friends,
            "Sent": self.win.tab_sent,
            "Received": self.win.tab_received,
            "Cards": self.win.tab_cards,
        }
        self.views: Dict[str, ListView] = {}
        for name, vm in self.lists.items():
            view = ListView(hosts[name], title=name)
            view.pack(fill="both", expand=True)
            self._bind(vm, view)
            self.views[name] = view

        self.win.protocol("WM_DELETE_WINDOW", self._on_close)
        mode = "offline demo data" if self.settings_vm.use_mock_api else self.settings_vm.api_base_url
        self.win.set_status_message(f"Ready ({mode}).")

    def run(self) -> None:
        self.context.start()
        self.win.mainloop()

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------
    def _load_settings(self) -> SettingsVM:
        vm = SettingsVM.from_env()
        store = SettingsLocal(root_dir=vm.cache_dir)
        try:
            payload = store.load_user_settings()
        except (OSError, ValueError) as exc:
            self._log.warning("Ignoring unreadable settings file %s: %s", store.path, exc)
            return vm
        if payload:
            vm.apply_dict(payload)
        return vm

    def _build_composer(self) -> ListComposer:
        cfg = self.settings_vm.config
        if cfg.use_mock_api:
            friends_api = FriendsAPIMock(records=demo_friends(), delay_s=0.4)
            cards_api = CardAPIMock(records=demo_cards(), delay_s=0.4)
            transfers_api = TransfersAPIMock(records=demo_transfers(), delay_s=0.4)
        else:
            self._rest = ListRestAdapter(
                cfg.api_base_url,
                api_key=cfg.api_key,
                request_timeout_s=cfg.request_timeout_s,
                retries=cfg.http_retries,
            )
            friends_api = cards_api = transfers_api = self._rest

        user = User(id="me", name=os.environ.get("USER", "me"), is_premium=cfg.is_premium)
        return ListComposer(
            friends_api=friends_api,
            cards_api=cards_api,
            transfers_api=transfers_api,
            friends_cache=FriendsCacheLocal(root_dir=cfg.cache_dir),
            context=self.context,
            user=user,
            hooks=SelectionHooks(
                on_friend=self._show_friend,
                on_card=self._show_card,
                on_transfer=self._show_transfer,
            ),
        )

    def _bind(self, vm: ListVM, view: ListView) -> None:
        vm.on_items_changed = lambda _items: view.set_rows(vm.rows())
        vm.on_refreshing = view.set_refreshing
        vm.on_error = view.show_error
        view.on_refresh = vm.refresh
        view.on_appear = vm.on_appear
        view.on_select = vm.select

    def _on_close(self) -> None:
        for vm in self.lists.values():
            vm.detach()
        self.context.stop()
        if self._rest is not None:
            self._rest.close()
        self.win.destroy()

    # ------------------------------------------------------------------
    # Selection hooks
    # ------------------------------------------------------------------
    def _show_friend(self, friend: Friend) -> None:
        messagebox.showinfo(friend.name, f"Phone: {friend.phone or '-'}", parent=self.win)

    def _show_card(self, card: Card) -> None:
        messagebox.showinfo("Card", f"{card.number}\nHolder: {card.holder}", parent=self.win)

    def _show_transfer(self, transfer: Transfer) -> None:
        body = (
            f"{format_amount(transfer.amount, transfer.currency_code)}\n"
            f"From: {transfer.sender}\nTo: {transfer.recipient}\n"
            f"On: {format_long_date(transfer.date)}"
        )
        messagebox.showinfo(transfer.description, body, parent=self.win)


def main() -> None:
    app = App()
    app.run()


if __name__ == "__main__":
    main()

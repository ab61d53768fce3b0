from __future__ import annotations

import json
import logging
import os
import threading
from typing import List, Sequence

from iacc.domain.models import Friend
from iacc.domain.ports import CacheMissError, FriendsCache, FriendsCompletion
from iacc.domain.result import Failure, Success


class FriendsCacheLocal(FriendsCache):
    """Local filesystem cache for the friends list (single JSON file).

    Concurrent saves are last-write-wins; the lock only keeps a write from
    interleaving with another write or a read.
    """

    FILE_NAME = "friends_cache.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir
        self._lock = threading.Lock()
        self._log = logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILE_NAME)

    def save(self, friends: Sequence[Friend]) -> None:
        payload = {"friends": [friend.to_dict() for friend in friends]}
        try:
            with self._lock:
                os.makedirs(self.root, exist_ok=True)
                with open(self.path, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False, indent=2)
        except OSError:
            # save() is fire-and-forget for callers
            self._log.exception("Failed to write friends cache to %s", self.path)

    def load_friends(self, completion: FriendsCompletion) -> None:
        try:
            friends = self._read()
        except (OSError, ValueError, KeyError, TypeError) as exc:
            completion(Failure(exc))
            return
        completion(Success(friends))

    def _read(self) -> List[Friend]:
        with self._lock:
            if not os.path.exists(self.path):
                raise CacheMissError(f"No cached friends at {self.path}")
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        entries = data.get("friends") if isinstance(data, dict) else data
        if not isinstance(entries, list):
            raise ValueError("friends cache: expected a list of friends")
        return [Friend.from_dict(entry) for entry in entries]


class NullFriendsCache(FriendsCache):
    """Accepts saves and persists nothing; used for non-premium accounts."""

    def save(self, friends: Sequence[Friend]) -> None:
        return None

    def load_friends(self, completion: FriendsCompletion) -> None:
        completion(Success([]))


__all__ = ["FriendsCacheLocal", "NullFriendsCache"]

from __future__ import annotations

import json
from typing import Optional, Sequence

from ..common.logger import get_logger
from ..core.constants import USERS_KEY
from ..core.exceptions import StorageError, ValidationError
from ..storage.base import KeyValueStorage
from .model import User

logger = get_logger(__name__)


class TrackerStore:
    """In-memory users/settings/entries, synced to a key-value storage.

    ``load()`` runs once at startup; every mutation goes through ``add`` or
    ``update`` and is flushed right away. Persistence problems are logged and
    never raised to callers: a bad payload loads as an empty store, a failed
    write keeps the in-memory state.
    """

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage
        self._users: dict[str, User] = {}

    def load(self) -> None:
        self._users = {}
        try:
            raw = self._storage.get_item(USERS_KEY)
        except StorageError:
            logger.exception("Error loading saved users")
            return
        if not raw:
            return

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"{USERS_KEY} is not an object")
            users = {username: User.from_dict(username, payload) for username, payload in data.items()}
        except (ValueError, TypeError, KeyError, ValidationError) as e:
            logger.error("Error loading saved users: %s", e)
            return

        self._users = users
        logger.info("Loaded %d user(s)", len(users))

    def save(self) -> bool:
        payload = json.dumps({name: user.to_dict() for name, user in self._users.items()})
        try:
            self._storage.set_item(USERS_KEY, payload)
        except StorageError:
            logger.exception("Error saving users")
            return False
        return True

    def get_by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def add(self, user: User) -> None:
        self._users[user.username] = user
        self.save()

    def update(self, user: User) -> None:
        self._users[user.username] = user
        self.save()

    def list_usernames(self) -> Sequence[str]:
        return list(self._users)

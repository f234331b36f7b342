from __future__ import annotations

from typing import Optional

from ..common.logger import get_logger
from ..core.constants import REMEMBER_USER_KEY, SESSION_USER_KEY
from ..core.exceptions import StorageError
from ..storage.base import KeyValueStorage

logger = get_logger(__name__)


class SessionStore:
    """Tracks who is logged in.

    "Remember me" writes the username to the remember storage (durable, or the
    permanent browser session when served); otherwise it lives in
    session-scoped storage only. Establishing a session drops the other marker,
    so exactly one of them names the active user.
    """

    def __init__(self, remembered: KeyValueStorage, session: KeyValueStorage):
        self._remembered = remembered
        self._session = session

    def establish(self, username: str, *, remember: bool = False) -> None:
        if remember:
            self._session.remove_item(SESSION_USER_KEY)
            self._write_remembered(username)
        else:
            self._write_remembered(None)
            self._session.set_item(SESSION_USER_KEY, username)

    def current(self) -> Optional[str]:
        return self._remembered.get_item(REMEMBER_USER_KEY) or self._session.get_item(SESSION_USER_KEY)

    def clear(self) -> None:
        self._write_remembered(None)
        self._session.remove_item(SESSION_USER_KEY)

    def _write_remembered(self, username: Optional[str]) -> None:
        try:
            if username is None:
                self._remembered.remove_item(REMEMBER_USER_KEY)
            else:
                self._remembered.set_item(REMEMBER_USER_KEY, username)
        except StorageError:
            logger.exception("Could not update remembered user")

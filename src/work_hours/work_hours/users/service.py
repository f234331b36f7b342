from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.logger import get_logger
from ..common.validators import require_non_empty
from ..core.exceptions import AuthError, DuplicateUserError
from ..settings.model import Settings
from .model import User
from .repository import UserRepository
from .session import SessionStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What the presentation layer keeps after login."""

    username: str
    remembered: bool


class AuthService:
    """Use cases: register, login, logout, restore session.

    Passwords are compared as plain strings; this is a local, single-user tool.
    """

    def __init__(self, users: UserRepository, sessions: SessionStore):
        self._users = users
        self._sessions = sessions

    def register(self, username: str, password: str, *, remember: bool = False) -> User:
        username = require_non_empty(username, "Username")
        password = require_non_empty(password, "Password")

        if self._users.get_by_username(username):
            raise DuplicateUserError("Username already exists")

        user = User(username=username, password=password, settings=Settings(), entries=())
        self._users.add(user)
        self._sessions.establish(username, remember=remember)
        logger.info("Registered user %s", username)
        return user

    def login(self, username: str, password: str, *, remember: bool = False) -> SessionUser:
        user = self._users.get_by_username(username or "")
        if not user or user.password != password:
            raise AuthError("Invalid username or password")

        self._sessions.establish(user.username, remember=remember)
        return SessionUser(username=user.username, remembered=bool(remember))

    def logout(self) -> None:
        self._sessions.clear()

    def current_user(self) -> Optional[str]:
        username = self._sessions.current()
        if username and self._users.get_by_username(username):
            return username
        return None

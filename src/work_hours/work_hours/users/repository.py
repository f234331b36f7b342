from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete
    storage backend.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def add(self, user: User) -> None:
        raise NotImplementedError

    def update(self, user: User) -> None:
        raise NotImplementedError

    def list_usernames(self) -> Sequence[str]:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..entries.model import Entry
from ..settings.model import Settings


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: a plain data object (no storage access). Changes produce a new User
    through ``dataclasses.replace``.
    """

    username: str
    password: str
    settings: Settings = field(default_factory=Settings)
    entries: tuple[Entry, ...] = ()

    def to_dict(self) -> dict:
        return {
            "password": self.password,
            "settings": self.settings.to_dict(),
            "entries": [e.to_dict() for e in self.entries],
        }

    @classmethod
    def from_dict(cls, username: str, data: dict[str, Any]) -> "User":
        if not isinstance(data, dict):
            raise ValueError(f"user {username!r} is not an object")
        entries = data.get("entries") or []
        if not isinstance(entries, list):
            raise ValueError(f"entries of {username!r} is not a list")
        return cls(
            username=username,
            password=str(data.get("password", "")),
            settings=Settings.from_dict(data.get("settings")),
            entries=tuple(Entry.from_dict(e) for e in entries),
        )

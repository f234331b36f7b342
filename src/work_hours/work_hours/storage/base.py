from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """String-keyed, string-valued storage.

    Values are opaque strings; callers serialize to JSON themselves. Backends:
    a JSON file for durable data, memory or the Flask session for data scoped
    to the current run/browser session.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

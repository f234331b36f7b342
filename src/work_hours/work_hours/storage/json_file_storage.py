from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from ..common.logger import get_logger
from ..core.exceptions import StorageError

logger = get_logger(__name__)


class JsonFileStorage:
    """Durable storage backed by a single JSON object on disk.

    The file maps keys to string values. A missing file is an empty storage; an
    unreadable or corrupted file is logged and treated as empty so the
    application can still start.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._items: Optional[dict[str, str]] = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if self._items is not None:
            return self._items

        items: dict[str, str] = {}
        if self._path.exists():
            try:
                raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
                if not isinstance(raw, dict):
                    raise ValueError("top-level value is not an object")
                items = {str(k): str(v) for k, v in raw.items()}
            except (OSError, ValueError) as e:
                logger.error("Could not read storage file %s: %s", self._path, e)

        self._items = items
        return items

    def _flush(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(self._items, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write storage file {self._path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        self._load()[key] = str(value)
        self._flush()

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._flush()

# wholesale/storefront/storage.py
"""
Storage ports for persisted client state.

A store saves its whole state under a fixed namespace key after every
mutation and loads it back verbatim on construction.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class StoragePort(Protocol):
    def load(self, key: str) -> dict[str, Any] | None: ...

    def save(self, key: str, data: dict[str, Any]) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """In-process storage for tests; values go through JSON like the real thing."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self, key: str) -> dict[str, Any] | None:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, data: dict[str, Any]) -> None:
        self._data[key] = json.dumps(data)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class FileStorage:
    """
    One JSON file per namespace under `root` (e.g. root/rfq-cart-storage.json).

    Writes go to a temporary file first and are moved into place with
    os.replace, so a reader never sees a half-written file.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def load(self, key: str) -> dict[str, Any] | None:
        path = self._path(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def save(self, key: str, data: dict[str, Any]) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp, path)

    def remove(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug("Removed persisted state %s", path)

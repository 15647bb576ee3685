"""Key-value storage slots.

Each slot holds one string under a fixed key, the way a browser profile's
local storage does. The snapshot, the auth token and the pending verification
email each live in their own slot.
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Dict, Optional, Protocol

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        """Write a slot. Raises OSError when the write cannot be completed."""
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class FileKeyValueStore(KeyValueStore):
    """One file per key inside ``directory``."""

    def __init__(self, directory: Path):
        self._directory = Path(directory)
        self._directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.slot"

    def get(self, key: str) -> Optional[str]:
        try:
            return self._path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink()
        except FileNotFoundError:
            pass


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed slots. ``quota_bytes`` bounds the total stored size."""

    def __init__(self, quota_bytes: Optional[int] = None):
        self._data: Dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota_bytes is not None:
            others = sum(len(v.encode("utf-8")) for k, v in self._data.items() if k != key)
            if others + len(value.encode("utf-8")) > self._quota_bytes:
                raise OSError(f"Storage quota exceeded while writing {key!r}")
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

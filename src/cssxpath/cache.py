"""Compiled-selector cache."""

from __future__ import annotations

import threading
from typing import Mapping, Protocol

__all__ = ["SelectorCache", "MemoryCache"]


class SelectorCache(Protocol):
    """Storage for compiled CSS -> XPath results, keyed by expression hash."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self) -> None: ...

    def snapshot(self) -> dict[str, str]: ...

    def replace(self, entries: Mapping[str, str]) -> None: ...


class MemoryCache:
    """In-process dict cache guarded by a lock.

    Compilation is deterministic, so two threads racing on one key write
    the same value; last write wins.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, str] = dict(entries or {})

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._entries)

    def replace(self, entries: Mapping[str, str]) -> None:
        with self._lock:
            self._entries = dict(entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

"""Process-wide record of loaded fragments, consulted by the once-modes."""

from __future__ import annotations

import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path


class LoadRegistry(ABC):
    """Abstract contract for "already loaded" tracking."""

    @staticmethod
    def canonical_key(file_path: str | os.PathLike[str]) -> str:
        return os.path.realpath(os.fspath(file_path))

    @abstractmethod
    def claim(self, file_path: str | Path) -> bool:
        """Mark `file_path` as loaded; return False if it already was."""

    @abstractmethod
    def mark(self, file_path: str | Path) -> None:
        """Record `file_path` as loaded, whether or not it already was."""

    @abstractmethod
    def release(self, file_path: str | Path) -> None:
        pass

    @abstractmethod
    def is_loaded(self, file_path: str | Path) -> bool:
        pass

    @abstractmethod
    def loaded_paths(self) -> list[str]:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass


class InMemoryLoadRegistry(LoadRegistry):
    """Lock-guarded set of canonical paths."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loaded: set[str] = set()

    def claim(self, file_path: str | Path) -> bool:
        key = self.canonical_key(file_path)
        with self._lock:
            if key in self._loaded:
                return False
            self._loaded.add(key)
            return True

    def mark(self, file_path: str | Path) -> None:
        key = self.canonical_key(file_path)
        with self._lock:
            self._loaded.add(key)

    def release(self, file_path: str | Path) -> None:
        key = self.canonical_key(file_path)
        with self._lock:
            self._loaded.discard(key)

    def is_loaded(self, file_path: str | Path) -> bool:
        key = self.canonical_key(file_path)
        with self._lock:
            return key in self._loaded

    def loaded_paths(self) -> list[str]:
        with self._lock:
            return sorted(self._loaded)

    def reset(self) -> None:
        with self._lock:
            self._loaded.clear()


_default_registry = InMemoryLoadRegistry()


def get_default_registry() -> LoadRegistry:
    """Return the registry shared by every loader in this process."""
    return _default_registry

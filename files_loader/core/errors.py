"""Error types raised by the files loader."""

from __future__ import annotations


class FilesLoaderError(Exception):
    """Base class for loader errors."""


class InvalidArgumentError(FilesLoaderError, ValueError):
    """Raised when the path set or the inclusion mode is unusable."""


class UnexpectedValueError(FilesLoaderError, ValueError):
    """Raised when a requested path is a directory or does not exist."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

"""Base fragment runner contract."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, MutableMapping

from files_loader.core.errors import UnexpectedValueError


class BaseFragmentRunner(ABC):
    """Abstract runner that brings one fragment into an execution context."""

    @staticmethod
    def validate_file(file_path: str | os.PathLike[str]) -> Path:
        # os.path treats "" as missing; Path("") would mean the cwd.
        raw = os.fspath(file_path)
        if os.path.isdir(raw):
            raise UnexpectedValueError(
                f'The filename "{raw}" of the requested file must not be a directory name.',
                path=raw,
            )
        if not os.path.exists(raw):
            raise UnexpectedValueError(
                f'The requested file "{raw}" does not exist.',
                path=raw,
            )
        return Path(raw)

    @abstractmethod
    def run(self, file_path: str | Path, context: MutableMapping[str, Any]) -> None:
        """Execute the fragment at `file_path` against `context`."""

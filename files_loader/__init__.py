"""Validated loading of fragment files into an execution context."""

from files_loader.core.errors import FilesLoaderError, InvalidArgumentError, UnexpectedValueError
from files_loader.core.types import ALLOWED_MODES, InclusionMode
from files_loader.libs.loader.files_loader import FilesLoader

__all__ = [
    "ALLOWED_MODES",
    "FilesLoader",
    "FilesLoaderError",
    "InclusionMode",
    "InvalidArgumentError",
    "UnexpectedValueError",
]

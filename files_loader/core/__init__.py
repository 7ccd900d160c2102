"""
Core Layer - shared contracts.

This package contains:
- Configuration management (settings.py)
- Inclusion modes and path-set types (types.py)
- Error types (errors.py)
- Trace collection
"""

from files_loader.core.errors import FilesLoaderError, InvalidArgumentError, UnexpectedValueError
from files_loader.core.types import ALLOWED_MODES, InclusionMode

__all__ = [
    "ALLOWED_MODES",
    "InclusionMode",
    "FilesLoaderError",
    "InvalidArgumentError",
    "UnexpectedValueError",
]

"""Loader package.

Exports the files loader, the fragment runner contracts and the once-mode
registry.
"""

from files_loader.libs.loader.base_runner import BaseFragmentRunner
from files_loader.libs.loader.files_loader import FilesLoader
from files_loader.libs.loader.load_registry import (
    InMemoryLoadRegistry,
    LoadRegistry,
    get_default_registry,
)
from files_loader.libs.loader.python_runner import PythonFragmentRunner
from files_loader.libs.loader.runner_factory import RunnerFactory

__all__ = [
    "BaseFragmentRunner",
    "FilesLoader",
    "InMemoryLoadRegistry",
    "LoadRegistry",
    "PythonFragmentRunner",
    "RunnerFactory",
    "get_default_registry",
]

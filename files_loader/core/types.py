"""Core data types shared by the loader, the runners and the registry.

Rules:
- inclusion modes are parsed case-insensitively and compared lowercase
- a path set is either one path or a collection of paths; mapping keys are ignored
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Iterable, Mapping, Union

PathLike = Union[str, "os.PathLike[str]"]
PathSet = Union[PathLike, Iterable[PathLike], Mapping[object, PathLike]]


class InclusionMode(str, Enum):
    """How a fragment is brought into the execution context."""

    INCLUDE = "include"
    INCLUDE_ONCE = "include_once"
    REQUIRE = "require"
    REQUIRE_ONCE = "require_once"

    @property
    def once(self) -> bool:
        """True when the fragment may run at most once per process."""
        return self in (InclusionMode.INCLUDE_ONCE, InclusionMode.REQUIRE_ONCE)

    @property
    def required(self) -> bool:
        # Label only: existence is checked for every mode.
        return self in (InclusionMode.REQUIRE, InclusionMode.REQUIRE_ONCE)


ALLOWED_MODES: tuple[str, ...] = tuple(mode.value for mode in InclusionMode)

DEFAULT_MODE = InclusionMode.REQUIRE.value

"""A component for loading fragment files into an execution context.

`FilesLoader.load_files` validates its input, then runs each requested file in
order with the semantics of the selected inclusion mode:

- ``include`` / ``require``: run the fragment every time.
- ``include_once`` / ``require_once``: run it only if this process has not
  loaded the same (canonical) path before, in any mode; otherwise skip
  silently.

Every successful run is recorded in the load registry.

Loading is not transactional: when a later path fails, fragments loaded
earlier in the same call stay loaded.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping, Sized
from pathlib import Path
from typing import Any, MutableMapping

from files_loader.core.errors import InvalidArgumentError
from files_loader.core.trace.trace_context import (
    PATH_FAILED,
    PATH_LOADED,
    PATH_SKIPPED,
    TraceContext,
)
from files_loader.core.types import ALLOWED_MODES, DEFAULT_MODE, InclusionMode, PathLike, PathSet
from files_loader.libs.loader.base_runner import BaseFragmentRunner
from files_loader.libs.loader.load_registry import LoadRegistry, get_default_registry
from files_loader.libs.loader.python_runner import PythonFragmentRunner
from files_loader.libs.loader.runner_factory import RunnerFactory
from files_loader.observability.logger import get_logger, get_logger_from_settings


def _is_path(value: Any) -> bool:
    return isinstance(value, (str, os.PathLike))


class FilesLoader:
    """Load one or more files using an inclusion mode."""

    def __init__(
        self,
        context: MutableMapping[str, Any] | None = None,
        registry: LoadRegistry | None = None,
        runner: BaseFragmentRunner | None = None,
        logger: logging.Logger | None = None,
        default_mode: str = DEFAULT_MODE,
        trace_file: str | None = None,
    ) -> None:
        """
        Args:
            context: Namespace fragments run in. A fresh dict when omitted.
            registry: Record of loaded paths, consulted by the once-modes.
                Defaults to the process-wide registry.
            runner: Runner that executes one fragment. Defaults to
                PythonFragmentRunner.
            logger: Logger for per-path debug output.
            default_mode: Mode used when `load_files` gets no mode.
            trace_file: When set, calls without an explicit trace get one
                that is appended to this JSONL file when the call ends.
        """
        self.context: MutableMapping[str, Any] = context if context is not None else {}
        self.registry = registry if registry is not None else get_default_registry()
        self.runner = runner if runner is not None else PythonFragmentRunner()
        self.logger = logger or get_logger("loader")
        self.default_mode = default_mode
        self.trace_file = trace_file

    @classmethod
    def from_settings(
        cls,
        settings: Any,
        context: MutableMapping[str, Any] | None = None,
        registry: LoadRegistry | None = None,
    ) -> "FilesLoader":
        """Build a loader whose runner, default mode, log level and trace file
        come from settings."""
        observability = getattr(settings, "observability", None)
        trace_file = None
        if getattr(observability, "trace_enabled", False):
            trace_file = observability.trace_file
        return cls(
            context=context,
            registry=registry,
            runner=RunnerFactory.create(settings),
            logger=get_logger_from_settings(settings, "loader"),
            default_mode=settings.loader.default_mode,
            trace_file=trace_file,
        )

    def load_files(
        self,
        files: PathSet,
        mode: str | None = None,
        trace: TraceContext | None = None,
    ) -> "FilesLoader":
        """Load one or more files.

        Args:
            files: A filename, a sequence of filenames, or a mapping whose
                values are filenames.
            mode: One of "include", "include_once", "require" or
                "require_once", case-insensitive. Defaults to the loader's
                default mode ("require" unless configured otherwise).
            trace: Optional trace context; each path and a "load_files"
                summary stage are recorded. The caller finishes it. Without
                one, a trace is created and finished here if the loader has
                a `trace_file`.

        Returns:
            The loader itself, for chaining.

        Raises:
            InvalidArgumentError: The files list is empty or the mode is not
                supported. Raised before any file is touched.
            UnexpectedValueError: One of the files is a directory or does not
                exist. Files before it have already been loaded.
        """
        mode_to_lower = self._normalize_mode(self.default_mode if mode is None else mode)

        files = self._validate_files(files)
        inclusion_mode = self._validate_mode(mode_to_lower)

        owned_trace = trace is None and self.trace_file is not None
        if owned_trace:
            trace = TraceContext(log_file=self.trace_file)
        try:
            self._include_files(files, inclusion_mode, trace)
        finally:
            if owned_trace:
                trace.finish()

        return self

    @staticmethod
    def _normalize_mode(mode: Any) -> str:
        if not isinstance(mode, str):
            raise InvalidArgumentError(
                f"The inclusion mode must be a string, got {type(mode).__name__}."
            )
        return mode.lower()

    @staticmethod
    def _validate_files(files: Any) -> PathLike | Iterable[Any]:
        """Reject an empty filename or an empty files list."""
        if files is None:
            raise InvalidArgumentError("No files provided, in order to be loaded.")

        if _is_path(files):
            if not os.fspath(files):
                raise InvalidArgumentError("No files provided, in order to be loaded.")
            return files

        if isinstance(files, (bytes, bytearray)) or not isinstance(files, Iterable):
            raise InvalidArgumentError(
                f"Unsupported files type: {type(files).__name__}. "
                "Expected a filename or a collection of filenames."
            )

        if not isinstance(files, Sized):
            files = list(files)

        if not len(files):
            raise InvalidArgumentError("No files provided, in order to be loaded.")
        return files

    @staticmethod
    def _validate_mode(mode: str) -> InclusionMode:
        if mode not in ALLOWED_MODES:
            raise InvalidArgumentError(
                "The provided inclusion mode to use for loading files is not valid. "
                "It must be one of the following strings: "
                + ", ".join(ALLOWED_MODES)
                + "."
            )
        return InclusionMode(mode)

    @staticmethod
    def _as_list(files: PathLike | Iterable[Any]) -> list[PathLike]:
        if _is_path(files):
            return [files]  # type: ignore[list-item]

        values = files.values() if isinstance(files, Mapping) else files
        out: list[PathLike] = []
        for index, item in enumerate(values):
            if not _is_path(item):
                raise InvalidArgumentError(
                    f"Invalid filename at position {index}: expected str or os.PathLike, "
                    f"got {type(item).__name__}."
                )
            out.append(item)
        return out

    def _include_files(
        self,
        files: PathLike | Iterable[Any],
        mode: InclusionMode,
        trace: TraceContext | None,
    ) -> None:
        file_list = self._as_list(files)
        if trace is not None:
            trace.mode = mode.value

        failed: str | None = None
        try:
            for file in file_list:
                failed = os.fspath(file)
                if trace is not None:
                    trace.start_path()
                try:
                    path = self.runner.validate_file(file)
                    ran = self._include_file(path, mode)
                except BaseException as e:
                    if trace is not None:
                        trace.record_path(failed, PATH_FAILED, error=f"{type(e).__name__}: {e}")
                    raise
                if trace is not None:
                    trace.record_path(str(path), PATH_LOADED if ran else PATH_SKIPPED)
            failed = None
        finally:
            if trace is not None:
                trace.record_stage(
                    "load_files",
                    {
                        "mode": mode.value,
                        "requested": len(file_list),
                        "loaded": trace.paths_with_status(PATH_LOADED),
                        "skipped": trace.paths_with_status(PATH_SKIPPED),
                        "failed": failed,
                    },
                )

    def _include_file(self, path: Path, mode: InclusionMode) -> bool:
        """Run one fragment; return False when a once-mode skipped it."""
        if not mode.once:
            self.runner.run(path, self.context)
            self.registry.mark(path)
            self.logger.debug("Loaded %s (%s)", path, mode.value)
            return True

        if not self.registry.claim(path):
            self.logger.debug("Skipped %s (%s): already loaded", path, mode.value)
            return False

        try:
            self.runner.run(path, self.context)
        except BaseException:
            self.registry.release(path)
            raise
        self.logger.debug("Loaded %s (%s)", path, mode.value)
        return True

"""Runner that executes Python source fragments.

The fragment is compiled with its own path as filename, so tracebacks point
at the fragment, and executed against the caller's namespace: names it binds
stay visible to the caller and to fragments loaded later.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, MutableMapping

from files_loader.libs.loader.base_runner import BaseFragmentRunner


class PythonFragmentRunner(BaseFragmentRunner):
    def __init__(self, settings: Any = None, encoding: str | None = None, **kwargs: Any) -> None:
        loader_settings = getattr(settings, "loader", None)
        self.encoding = encoding or getattr(loader_settings, "encoding", None) or "utf-8"

    def run(self, file_path: str | Path, context: MutableMapping[str, Any]) -> None:
        path = Path(file_path)
        source = path.read_text(encoding=self.encoding)
        code = compile(source, str(path), "exec")
        # exec() needs a real dict for globals.
        if isinstance(context, dict):
            exec(code, context)
            return
        namespace = dict(context)
        exec(code, namespace)
        context.update(namespace)

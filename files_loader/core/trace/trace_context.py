"""Trace of one `load_files` call: the mode, each path's outcome and timing."""

from __future__ import annotations

import json
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

PATH_LOADED = "loaded"
PATH_SKIPPED = "skipped"
PATH_FAILED = "failed"


@dataclass
class TraceContext:
    """Trace context for one load call.

    Attributes:
        trace_id: Unique identifier for this trace
        started_at: Timestamp when trace was created
        mode: Inclusion mode of the traced call, set by the loader
        paths: One entry per visited path, in visiting order
        stages: Free-form stage data (the loader records a "load_files" summary)
        log_file: JSONL file `finish()` appends to, if any
    """

    trace_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    started_at: datetime = field(default_factory=datetime.now)
    mode: str | None = None
    paths: List[Dict[str, Any]] = field(default_factory=list)
    stages: Dict[str, Any] = field(default_factory=dict)
    log_file: str | None = None
    _path_started: float | None = field(default=None, init=False, repr=False)

    def start_path(self) -> None:
        self._path_started = time.perf_counter()

    def record_path(self, path: str, status: str, error: str | None = None) -> None:
        """Close the timing opened by `start_path` and store the outcome."""
        elapsed_ms = 0.0
        if self._path_started is not None:
            elapsed_ms = (time.perf_counter() - self._path_started) * 1000
        self._path_started = None

        entry: Dict[str, Any] = {
            "path": path,
            "status": status,
            "elapsed_ms": round(elapsed_ms, 3),
        }
        if error is not None:
            entry["error"] = error
        self.paths.append(entry)

    def paths_with_status(self, status: str) -> List[str]:
        return [entry["path"] for entry in self.paths if entry["status"] == status]

    def record_stage(self, stage_name: str, data: Dict[str, Any]) -> None:
        self.stages[stage_name] = {"timestamp": datetime.now().isoformat(), "data": data}

    def get_stage_data(self, stage_name: str) -> Optional[Dict[str, Any]]:
        return self.stages.get(stage_name)

    def to_dict(self) -> Dict[str, Any]:
        ended_at = datetime.now()
        return {
            "trace_id": self.trace_id,
            "started_at": self.started_at.isoformat(),
            "ended_at": ended_at.isoformat(),
            "total_latency": (ended_at - self.started_at).total_seconds(),
            "mode": self.mode,
            "paths": self.paths,
            "stages": self.stages,
        }

    def finish(self) -> Dict[str, Any]:
        """Return the payload, appending it to `log_file` as one JSON line."""
        payload = self.to_dict()
        if self.log_file:
            path = Path(self.log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(payload, ensure_ascii=False) + "\n")
        return payload

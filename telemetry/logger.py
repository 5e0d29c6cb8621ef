from __future__ import annotations

import json
import os
import threading
from typing import TYPE_CHECKING, Any, Dict, Optional, TextIO

if TYPE_CHECKING:
    from mars_rover.result import MissionResult
    from mars_rover.rover import RoverState


class MissionTelemetryLogger:
    """Structured JSONL logger for mission telemetry.

    Thread-safe, append-only. One JSON object per interpreted step, plus a
    closing record per mission with the final result.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def __enter__(self) -> "MissionTelemetryLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _write(self, record: Dict[str, Any]) -> None:
        if self._fp is None:
            return
        line = json.dumps(record, separators=(",", ":"))
        with self._lock:
            self._fp.write(line + "\n")
            self._fp.flush()

    def log_step(
        self,
        step: int,
        command: str,
        state: "RoverState",
        status: Optional[str] = None,
    ) -> None:
        """Record the rover state after one command.

        ``status`` is set only on the step that ended the mission.
        """
        record: Dict[str, Any] = {"type": "step", "step": step, "command": command}
        record.update(state.to_dict())
        record["status"] = status
        self._write(record)

    def log_result(self, result: "MissionResult") -> None:
        record: Dict[str, Any] = {"type": "result"}
        record.update(result.to_dict())
        self._write(record)

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

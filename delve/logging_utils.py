"""Structured event log for level generation.

Every record is one line: ``level`` and ``ts`` first, then the event fields,
then any context bound to the logger. Generation binds ``depth`` and ``seed``
once per run so room/placement events can be traced back to the level that
produced them without repeating the fields at each call site.

    log = get_logger("delve.generator").bind(depth=3, seed=42)
    log.info(event="level_generated", rooms=11)
    # level=info ts=... event=level_generated rooms=11 logger=delve.generator depth=3 seed=42

``DELVE_LOG_LEVEL`` sets the threshold (debug/info/warn/error, default info).
``DELVE_LOG_JSON=1`` switches to one JSON object per line. Errors go to stderr.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("DELVE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("DELVE_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _render_value(v: Any) -> str:
    if isinstance(v, (int, float)):
        return str(v)
    if isinstance(v, (tuple, list)):
        return ",".join(_render_value(i) for i in v)
    return str(v).replace(" ", "_")


def format_record(level: str, fields: Dict[str, Any]) -> str:
    rec = {k: v for k, v in fields.items() if v is not None}
    if JSON_MODE:
        rec = {"level": level, "ts": int(time.time()), **rec}
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    parts.extend(f"{k}={_render_value(v)}" for k, v in rec.items())
    return " ".join(parts)


class EventLogger:
    def __init__(self, name: str, context: Dict[str, Any] | None = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **fields) -> "EventLogger":
        """Return a logger that appends ``fields`` to every record it writes."""
        return EventLogger(self.name, {**self.context, **fields})

    def _emit(self, level: str, fields: Dict[str, Any]) -> None:
        if LEVELS[level] < CURRENT_LEVEL:
            return
        record = {**fields, "logger": self.name}
        for k, v in self.context.items():
            record.setdefault(k, v)
        stream = sys.stderr if level == "error" else sys.stdout
        print(format_record(level, record), file=stream)

    def debug(self, **fields):
        self._emit("debug", fields)

    def info(self, **fields):
        self._emit("info", fields)

    def warn(self, **fields):
        self._emit("warn", fields)

    def error(self, **fields):
        self._emit("error", fields)


_LOGGERS: Dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    if name not in _LOGGERS:
        _LOGGERS[name] = EventLogger(name)
    return _LOGGERS[name]


__all__ = ["EventLogger", "get_logger", "format_record", "LEVELS"]

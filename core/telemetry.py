#!/usr/bin/env python3
"""Append-only JSONL event emitter for the slide deck server."""

from __future__ import annotations

import datetime as dt
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict


ROOT = Path(__file__).resolve().parents[1]
ROOT = Path(os.getenv("SLIDE_DECK_ROOT", str(ROOT))).resolve()
DEFAULT_EVENTS_FILE = ROOT / "logs" / "telemetry" / "events.jsonl"


def _iso_now() -> str:
    return dt.datetime.now().isoformat(timespec="seconds")


class TelemetryClient:
    def __init__(self, *, events_file: Path = DEFAULT_EVENTS_FILE):
        self.events_file = events_file if events_file.is_absolute() else ROOT / events_file
        self.events_file.parent.mkdir(parents=True, exist_ok=True)
        # request handler threads share one client
        self._lock = threading.Lock()

    def emit(
        self,
        *,
        module: str,
        action: str,
        status: str,
        request_id: str = "",
        latency_ms: int = 0,
        error_code: str = "",
        error_message: str = "",
        meta: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "ts": _iso_now(),
            "module": module,
            "action": action,
            "status": status,
            "request_id": request_id,
            "latency_ms": int(latency_ms or 0),
            "error_code": error_code,
            "error_message": error_message,
            "meta": meta or {},
        }
        line = json.dumps(payload, ensure_ascii=False) + "\n"
        with self._lock:
            with self.events_file.open("a", encoding="utf-8") as f:
                f.write(line)
        return payload

# wordcounter/logging/traces.py
from __future__ import annotations

import datetime as dt
import json
import os
from typing import Any, Dict

_REQUIRED_KEYS = {
    "input_path",
    "output_path",
    "distinct_words",
    "total_words",
    "lines_read",
    "timestamp_iso",
}


def emit_trace(row: Dict[str, Any], path: str) -> None:
    """
    Append one run-summary row to a JSONL file, guaranteeing required keys.

    Missing required keys are written as explicit nulls.
    """
    now = dt.datetime.now(dt.timezone.utc).isoformat()
    out = dict(row)
    out.setdefault("timestamp_iso", now)

    for k in _REQUIRED_KEYS - set(out.keys()):
        out[k] = None

    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(out, ensure_ascii=False))
        f.write("\n")

"""
Endpoint documentation served on GET /api.

The artifact is a JSON object keyed by "METHOD /path". It is re-read on
every request so edits show up without a restart.
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Any

DEFAULT_ENDPOINTS_FILE = Path(__file__).resolve().parent / "endpoints.json"


def endpoints_file() -> Path:
    raw = os.environ.get("ENDPOINTS_FILE", "").strip()
    return Path(raw) if raw else DEFAULT_ENDPOINTS_FILE


def _read_endpoints(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}.")
    return data


async def load_endpoints() -> dict[str, Any]:
    # File I/O runs off the event loop; any read/parse error propagates as unexpected.
    return await asyncio.to_thread(_read_endpoints, endpoints_file())

"""JSON record persistence for workspace files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson

LOGGER = logging.getLogger(__name__)


def read_json(path: Path) -> Any | None:
    """Return parsed JSON, or None when the file is missing or unparseable."""
    try:
        return orjson.loads(path.read_bytes())
    except FileNotFoundError:
        return None
    except (OSError, orjson.JSONDecodeError) as exc:
        LOGGER.warning("Ignoring unreadable record %s: %s", path, exc)
        return None


def write_json(path: Path, payload: Any) -> Path:
    """Replace `path` with an indented JSON document."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2) + b"\n")
    return path

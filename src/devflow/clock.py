"""Timestamp helpers shared by records, archives and reports."""

from __future__ import annotations

import re
from datetime import UTC, datetime

_FS_UNSAFE = re.compile(r"[:.]")


def utc_now() -> datetime:
    return datetime.now(UTC)


def isoformat_utc(moment: datetime) -> str:
    """Render a millisecond ISO-8601 timestamp with a `Z` suffix."""
    rendered = moment.astimezone(UTC).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")


def filesystem_timestamp(moment: datetime | None = None) -> str:
    """ISO timestamp with `:` and `.` replaced so it is safe as a path segment."""
    return _FS_UNSAFE.sub("-", isoformat_utc(moment or utc_now()))

"""Count reducers over parsed log entries.

Each function takes the full entry sequence and returns a fresh sparse
``{key: count}`` mapping. None of them keep state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC

from .models import LogEntry, StatusCategory


def status_category(status_code: int) -> StatusCategory:
    """Map a status code to its report bucket (404 is checked before 500)."""
    if status_code == 404:
        return StatusCategory.NOT_FOUND
    if status_code == 500:
        return StatusCategory.SERVER_ERROR
    return StatusCategory.OK


def minute_bucket(entry: LogEntry) -> str:
    """Return the UTC minute key, e.g. ``2024-03-01T14:22``."""
    return entry.timestamp.astimezone(UTC).isoformat(timespec="minutes")[:16]


def count_endpoints(entries: Iterable[LogEntry]) -> dict[str, int]:
    """Count entries per endpoint, skipping entries without one."""
    counts: dict[str, int] = {}
    for e in entries:
        if e.endpoint:
            counts[e.endpoint] = counts.get(e.endpoint, 0) + 1
    return counts


def count_calls_per_minute(entries: Iterable[LogEntry]) -> dict[str, int]:
    """Count entries per UTC minute. Every entry lands in exactly one bucket."""
    counts: dict[str, int] = {}
    for e in entries:
        key = minute_bucket(e)
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_calls_by_status(entries: Iterable[LogEntry]) -> dict[str, int]:
    """Count entries per status category, skipping entries without a status (or status 0)."""
    counts: dict[str, int] = {}
    for e in entries:
        if not e.status_code:
            continue
        key = status_category(e.status_code).value
        counts[key] = counts.get(key, 0) + 1
    return counts

"""API access log line parser."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from .models import LogEntry

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M %z"

_TS = r"(?P<ts>\d{4}-\d{2}-\d{2} \d{2}:\d{2} [+-]\d{2}:\d{2})"


@dataclass(frozen=True, slots=True)
class ApiLogParser:
    """Parse lines shaped like ``2024-03-01 14:22 +00:00: GET /api/users: 200``.

    A line is accepted only when it starts with a timestamp and later carries a
    ``: NNN`` status field; anything after the status is ignored.
    """

    # Timestamp, then the shortest request field up to ": NNN".
    _re = re.compile(
        rf"^{_TS}:(?P<request>.*?):\s*(?P<status>\d{{3}})",
        re.ASCII,
    )
    _request_re = re.compile(r"^\s*(?P<method>\w+)\s+(?P<target>\S+)")

    @staticmethod
    def _parse_ts(ts_str: str) -> datetime | None:
        """Parse ``YYYY-MM-DD HH:MM +HH:MM`` into UTC."""
        try:
            return datetime.strptime(ts_str, TIMESTAMP_FORMAT).astimezone(UTC)
        except (ValueError, OverflowError):
            return None

    def endpoint_from_request(self, request: str | None) -> str | None:
        """Pick the endpoint token out of the request field.

        ``GET /api/users`` yields ``/api/users``; any other non-empty field
        yields its first token.
        """
        if request is None:
            return None
        m = self._request_re.match(request)
        if m:
            return m.group("target")
        tokens = request.split()
        return tokens[0] if tokens else None

    def parse(self, line: str) -> LogEntry | None:
        """Parse one line, returning None when it is not a recognizable entry."""
        # Lines without timestamp and status (bare `word token` ones included) are never entries.
        m = self._re.match(line)
        if not m:
            return None

        ts = self._parse_ts(m.group("ts"))
        if ts is None:
            return None

        return LogEntry(
            timestamp=ts,
            endpoint=self.endpoint_from_request(m.group("request")),
            status_code=int(m.group("status")),
        )

"""Parsing, aggregation and rendering of API access log reports."""

from __future__ import annotations

from .aggregators import (
    count_calls_by_status,
    count_calls_per_minute,
    count_endpoints,
    minute_bucket,
    status_category,
)
from .log_service import build_report, generate_report, load_entries, parse_lines, read_log_lines
from .models import ApiLogReport, LogEntry, StatusCategory
from .parser import ApiLogParser

__all__ = [
    "ApiLogParser",
    "ApiLogReport",
    "LogEntry",
    "StatusCategory",
    "build_report",
    "count_calls_by_status",
    "count_calls_per_minute",
    "count_endpoints",
    "generate_report",
    "load_entries",
    "minute_bucket",
    "parse_lines",
    "read_log_lines",
    "status_category",
]

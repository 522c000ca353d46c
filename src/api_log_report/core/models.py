"""Core data models for API log reports."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class StatusCategory(str, Enum):
    """Coarse status buckets used by the status report."""

    NOT_FOUND = "Not found"
    SERVER_ERROR = "Server Error"
    OK = "OK"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One successfully parsed log line."""

    timestamp: datetime  # always timezone-aware
    endpoint: str | None = None
    status_code: int | None = None


class ApiLogReport(BaseModel):
    """Aggregated counts for one log file."""

    log_path: str = Field(description="Path of the log file that was read.")
    total_lines: int = Field(ge=0, description="Non-blank lines considered for parsing.")
    parsed_entries: int = Field(ge=0, description="Lines that produced a log entry.")
    skipped_lines: int = Field(ge=0, description="Non-blank lines that did not parse.")
    endpoint_counts: dict[str, int] = Field(
        default_factory=dict, description="Requests per endpoint."
    )
    calls_per_minute: dict[str, int] = Field(
        default_factory=dict, description="Requests per UTC minute (YYYY-MM-DDTHH:MM)."
    )
    calls_by_status: dict[str, int] = Field(
        default_factory=dict, description="Requests per status category."
    )

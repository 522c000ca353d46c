"""Log loading and report building.

This module is the main integration point: it reads a log file, parses the
lines and runs the aggregators over the resulting entries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import aiofiles

from .aggregators import count_calls_by_status, count_calls_per_minute, count_endpoints
from .models import ApiLogReport, LogEntry
from .parser import ApiLogParser

LOGGER = logging.getLogger(__name__)


def default_parser() -> ApiLogParser:
    return ApiLogParser()


async def read_log_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> list[str]:
    """Read the whole file and return its non-blank lines."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
        data = await f.read()

    lines = [line.rstrip("\r") for line in data.split("\n")]
    return [line for line in lines if line.strip()]


def parse_lines(lines: Iterable[str], parser: ApiLogParser | None = None) -> list[LogEntry]:
    """Parse lines in order, dropping the ones the parser rejects."""
    parser = parser or default_parser()
    entries: list[LogEntry] = []
    for line in lines:
        entry = parser.parse(line)
        if entry is not None:
            entries.append(entry)
    return entries


def build_report(
    log_path: str | Path,
    lines: list[str],
    *,
    parser: ApiLogParser | None = None,
) -> ApiLogReport:
    """Parse already-loaded lines and aggregate them into a report."""
    entries = parse_lines(lines, parser=parser)
    skipped = len(lines) - len(entries)
    LOGGER.debug(
        "Parsed %d of %d lines from %s (%d skipped)", len(entries), len(lines), log_path, skipped
    )
    return ApiLogReport(
        log_path=str(log_path),
        total_lines=len(lines),
        parsed_entries=len(entries),
        skipped_lines=skipped,
        endpoint_counts=count_endpoints(entries),
        calls_per_minute=count_calls_per_minute(entries),
        calls_by_status=count_calls_by_status(entries),
    )


async def load_entries(log_path: str | Path, **read_kwargs) -> list[LogEntry]:
    """Read a log file and return its parsed entries."""
    return parse_lines(await read_log_lines(log_path, **read_kwargs))


async def generate_report(
    log_path: str | Path,
    *,
    parser: ApiLogParser | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> ApiLogReport:
    """Read a log file and build all three reports from it."""
    lines = await read_log_lines(log_path, encoding=encoding, decode_errors=decode_errors)
    return build_report(log_path, lines, parser=parser)

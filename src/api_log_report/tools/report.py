"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from api_log_report.core.log_service import generate_report
from api_log_report.core.render import REPORT_CHOICES, select_reports


async def api_log_report_impl(*, log_path: str, report: str = "all") -> dict[str, Any]:
    """Implementation for the `api_log_report` MCP tool.

    Notes
    -----
    - report is validated before the file is read
    - a missing file raises FileNotFoundError
    """
    name = (report or "all").strip().lower()
    if name not in REPORT_CHOICES:
        valid = ", ".join(REPORT_CHOICES)
        raise ValueError(f"Unknown report '{report}'. Valid values: {valid}.")

    result = await generate_report(log_path)
    return {
        "log_path": result.log_path,
        "total_lines": result.total_lines,
        "parsed_entries": result.parsed_entries,
        "skipped_lines": result.skipped_lines,
        "reports": select_reports(result, name),
    }

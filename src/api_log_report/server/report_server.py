"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (build reports for a log file)
- Resources: addressable data blobs (help, sample log, report schema)
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m api_log_report.server.report_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from api_log_report.logging_config import configure_logging
from api_log_report.prompts.registry import register_prompts
from api_log_report.resources.registry import register_resources
from api_log_report.tools.report import api_log_report_impl

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("api-log-report", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def api_log_report(log_path: str, report: str = "all") -> dict[str, Any]:
    """Count API calls in an access log file.

    Parameters
    ----------
    log_path:
        Path to a local log file with lines like
        ``2024-03-01 14:22 +00:00: GET /api/users: 200``.
    report:
        One of "all", "endpoints", "minutes", "status".

    Returns
    -------
    dict:
        {"log_path": str, "total_lines": int, "parsed_entries": int,
         "skipped_lines": int, "reports": {name: {key: count}}}
    """
    return await api_log_report_impl(log_path=log_path, report=report)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def summarize_api_log(log_path: str, report: str = "all") -> list[dict[str, Any]]:
        """Build a prompt that summarizes API traffic for a log file."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a precise assistant reviewing API access logs. Use only the counts "
                    "returned by the tool. Point out the busiest endpoints, traffic spikes per "
                    "minute and the share of 'Not found' and 'Server Error' responses."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Call the `api_log_report` tool with:\n"
                    f"- log_path: {log_path}\n"
                    f"- report: {report}\n"
                    "Then summarize the result in a few bullet points and mention how many "
                    "lines were skipped as unparsable."
                ),
            },
        ]

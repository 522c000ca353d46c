"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from api_log_report.core.aggregators import status_category
from api_log_report.core.models import ApiLogReport, StatusCategory
from api_log_report.core.render import REPORTS

SAMPLE_LOG = (
    "2024-03-01 14:22 +00:00: GET /api/users: 200\n"
    "2024-03-01 14:22 +00:00: GET /api/orders: 404\n"
    "2024-03-01 14:23 +00:00: GET /api/users: 500\n"
    "not a log line at all\n"
)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://api-log-report/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs and reports."""
        reports = "\n".join(f"- {name}: {title}" for name, (title, _, _) in REPORTS.items())
        return (
            "Resources:\n"
            "- app://api-log-report/help\n"
            "- app://api-log-report/examples/sample-log\n"
            "- app://api-log-report/schemas/report\n"
            "- app://api-log-report/config/status-categories\n"
            "\nReports (api_log_report tool, `report` argument):\n"
            f"{reports}\n"
            "- all: every report above\n"
        )

    @mcp.resource("app://api-log-report/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny sample log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://api-log-report/schemas/report")
    def report_schema() -> dict[str, Any]:
        """Return the JSON schema of a full report."""
        return ApiLogReport.model_json_schema()

    @mcp.resource("app://api-log-report/config/status-categories")
    def status_categories() -> dict[str, Any]:
        """Describe how status codes are bucketed."""
        return {
            "categories": [c.value for c in StatusCategory],
            "rules": [
                {"status_code": 404, "category": status_category(404).value},
                {"status_code": 500, "category": status_category(500).value},
                {"status_code": "any other", "category": StatusCategory.OK.value},
            ],
        }

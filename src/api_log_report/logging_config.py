"""Logging setup shared by the CLI and the MCP server."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "LOG_REPORT_LOG_LEVEL"


def configure_logging() -> None:
    """Configure a reasonable default logging setup.

    Logs go to stderr so stdout stays clean for reports (CLI) and the
    protocol stream (MCP stdio).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

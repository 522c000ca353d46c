from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from api_log_report.core.log_service import generate_report
from api_log_report.core.render import REPORT_CHOICES, format_report, select_reports
from api_log_report.logging_config import configure_logging

LOGGER = logging.getLogger(__name__)

LOG_PATH_ENV = "LOG_REPORT_PATH"
DEFAULT_LOG_PATH = Path("data") / "prod-api-prod-out.log"


def _default_log_path() -> Path:
    env = os.getenv(LOG_PATH_ENV)
    return Path(env) if env else DEFAULT_LOG_PATH


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="API access log reports (endpoints, minutes, status).")
    p.add_argument(
        "log_path",
        nargs="?",
        default=None,
        help=f"Log file to read (default: ${LOG_PATH_ENV} or {DEFAULT_LOG_PATH})",
    )
    p.add_argument("--report", choices=REPORT_CHOICES, default="all", help="Report to print")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print JSON instead of tables")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)
    configure_logging()
    path = Path(args.log_path) if args.log_path else _default_log_path()

    try:
        report = asyncio.run(generate_report(path))
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except OSError as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        raise SystemExit(2)

    LOGGER.info("Parsed %d entries, skipped %d lines", report.parsed_entries, report.skipped_lines)

    if args.as_json:
        if args.report == "all":
            print(report.model_dump_json(indent=2))
        else:
            print(json.dumps(select_reports(report, args.report), indent=2))
        return

    print(format_report(report, args.report))


if __name__ == "__main__":
    main()

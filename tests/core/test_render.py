from __future__ import annotations

import pytest

from api_log_report.core.log_service import build_report
from api_log_report.core.render import format_report, format_table, select_reports


def test_format_table_sorted_and_aligned() -> None:
    out = format_table("Endpoint Counts", {"/b": 1, "/a": 12}, key_header="Endpoint")
    lines = out.splitlines()
    assert lines[0] == "Endpoint Counts:"
    assert lines[1] == "Endpoint  Count"
    assert lines[3] == "/a           12"
    assert lines[4] == "/b            1"


def test_format_table_empty() -> None:
    out = format_table("API Calls by Status Code", {})
    assert out.splitlines()[-1] == "(no entries)"


def test_select_reports(scenario_lines: list[str]) -> None:
    report = build_report("api.log", scenario_lines)
    assert list(select_reports(report)) == ["endpoints", "minutes", "status"]
    assert select_reports(report, "status") == {
        "status": {"OK": 1, "Not found": 1, "Server Error": 1}
    }


def test_select_reports_unknown_name(scenario_lines: list[str]) -> None:
    report = build_report("api.log", scenario_lines)
    with pytest.raises(ValueError, match="Unknown report"):
        select_reports(report, "hourly")


def test_format_report_titles(scenario_lines: list[str]) -> None:
    out = format_report(build_report("api.log", scenario_lines))
    assert "Endpoint Counts:" in out
    assert "API Calls per Minute:" in out
    assert "API Calls by Status Code:" in out
    assert "2024-03-01T14:22      2" in out

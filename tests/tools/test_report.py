from __future__ import annotations

from pathlib import Path

import pytest

from api_log_report.tools.report import api_log_report_impl


@pytest.mark.asyncio
async def test_api_log_report_impl_all(tmp_path: Path, write_api_log) -> None:
    log = tmp_path / "api.log"
    write_api_log(log)

    out = await api_log_report_impl(log_path=str(log))

    assert out["parsed_entries"] == 3
    assert out["skipped_lines"] == 1
    assert set(out["reports"]) == {"endpoints", "minutes", "status"}
    assert out["reports"]["minutes"] == {"2024-03-01T14:22": 2, "2024-03-01T14:23": 1}


@pytest.mark.asyncio
async def test_api_log_report_impl_single_report_is_case_insensitive(
    tmp_path: Path, write_api_log
) -> None:
    log = tmp_path / "api.log"
    write_api_log(log)

    out = await api_log_report_impl(log_path=str(log), report=" Status ")

    assert out["reports"] == {"status": {"OK": 1, "Not found": 1, "Server Error": 1}}


@pytest.mark.asyncio
async def test_api_log_report_impl_unknown_report(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Valid values"):
        await api_log_report_impl(log_path=str(tmp_path / "missing.log"), report="hourly")


@pytest.mark.asyncio
async def test_api_log_report_impl_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await api_log_report_impl(log_path=str(tmp_path / "missing.log"))

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SCENARIO_LINES = [
    "2024-03-01 14:22 +00:00: GET /api/users: 200",
    "2024-03-01 14:22 +00:00: GET /api/orders: 404",
    "2024-03-01 14:23 +00:00: GET /api/users: 500",
    "not a log line at all",
]


@pytest.fixture
def scenario_lines() -> list[str]:
    return list(SCENARIO_LINES)


@pytest.fixture
def write_api_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    SCENARIO_LINES[0],
                    "",
                    SCENARIO_LINES[1],
                    "   ",
                    SCENARIO_LINES[2],
                    SCENARIO_LINES[3],
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write

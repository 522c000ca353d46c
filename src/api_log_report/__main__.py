"""Module entrypoint.

Allows:
    python -m api_log_report
"""

from __future__ import annotations

from api_log_report.cli import main

if __name__ == "__main__":
    main()

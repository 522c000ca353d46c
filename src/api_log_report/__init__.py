"""Access log report generator.

Parses API access log lines and aggregates them into per-endpoint,
per-minute and per-status-category request counts.
"""

from __future__ import annotations

__version__ = "0.1.0"

"""Plain-text table rendering for reports."""

from __future__ import annotations

from .models import ApiLogReport

# report name -> (title, key column header, ApiLogReport field)
REPORTS: dict[str, tuple[str, str, str]] = {
    "endpoints": ("Endpoint Counts", "Endpoint", "endpoint_counts"),
    "minutes": ("API Calls per Minute", "Minute (UTC)", "calls_per_minute"),
    "status": ("API Calls by Status Code", "Status", "calls_by_status"),
}
REPORT_CHOICES = ("all", *REPORTS)


def select_reports(report: ApiLogReport, name: str = "all") -> dict[str, dict[str, int]]:
    """Return the requested report mappings keyed by report name."""
    if name == "all":
        names = list(REPORTS)
    elif name in REPORTS:
        names = [name]
    else:
        valid = ", ".join(REPORT_CHOICES)
        raise ValueError(f"Unknown report '{name}'. Valid values: {valid}.")
    return {n: getattr(report, REPORTS[n][2]) for n in names}


def format_table(title: str, counts: dict[str, int], key_header: str = "Key") -> str:
    """Render a mapping as a two-column table, rows sorted by key."""
    rows = sorted(counts.items())
    key_width = max([len(key_header), *(len(k) for k, _ in rows)])
    count_width = max([len("Count"), *(len(str(v)) for _, v in rows)])

    lines = [
        f"{title}:",
        f"{key_header:<{key_width}}  {'Count':>{count_width}}",
        f"{'-' * key_width}  {'-' * count_width}",
    ]
    lines.extend(f"{k:<{key_width}}  {v:>{count_width}}" for k, v in rows)
    if not rows:
        lines.append("(no entries)")
    return "\n".join(lines)


def format_report(report: ApiLogReport, name: str = "all") -> str:
    """Render the selected reports as tables separated by blank lines."""
    tables = [
        format_table(REPORTS[n][0], counts, key_header=REPORTS[n][1])
        for n, counts in select_reports(report, name).items()
    ]
    return "\n\n".join(tables)

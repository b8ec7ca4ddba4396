"""formatter — report output for stderr and JSON.

Provides a human-readable stderr format (one line per report plus a
summary footer) and a structured JSON document.  Message text comes from
the templates in ``config/defaults.yaml`` with report data interpolated.
"""

from __future__ import annotations

from typing import Any

from import_newlines.lib import config
from import_newlines.lib.rules import Report
from import_newlines.lib.theme import code as _c


# ---------------------------------------------------------------------------
# Single report
# ---------------------------------------------------------------------------


def report_to_dict(report: Report) -> dict[str, Any]:
    """Flatten a report into JSON-compatible data."""
    data: dict[str, Any] = {
        "messageId": report.message_id,
        "message": report.message,
        "line": report.line,
        "column": report.column,
        "data": dict(report.data),
        "fix": None,
    }
    if report.fix is not None:
        data["fix"] = {
            "range": list(report.fix.range) if report.fix.range else None,
            "text": report.fix.text,
        }
    return data


def format_report_stderr(filepath: str, report: Report) -> str:
    """Format a single report as ``path:line:col  message  [id]``.

    Columns are shown 1-based, matching editors.
    """
    location_tpl = config.get_str("formatting.report_line_template")
    location = location_tpl.format(
        filepath=filepath, line=report.line, column=report.column + 1
    )
    return (
        f"  {_c('location')}{location}{_c('reset')}  "
        f"{_c('error')}{report.message}{_c('reset')}  "
        f"{_c('message_id')}[{report.message_id}]{_c('reset')}"
    )


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def format_summary_stderr(filepath: str, total: int, fixable: int) -> str:
    """Format the summary footer.

    Args:
        filepath: The linted file.
        total: Number of reports.
        fixable: Number of reports carrying a fix.

    Returns:
        Formatted summary string.
    """
    bar_char = config.get_str("formatting.summary_bar_char")
    bar_width = config.get_int("formatting.summary_bar_width")
    lbl_file = config.get_str("labels.file")
    lbl_problems = config.get_str("labels.problems")
    lbl_fixable = config.get_str("labels.fixable")

    bar = f"{_c('summary_bar')}{bar_char * bar_width}{_c('reset')}"
    parts: list[str] = [bar]
    parts.append(f"  {_c('bold')}{lbl_file}{_c('reset')} {filepath}")
    if total:
        parts.append(
            f"  {_c('bold')}{lbl_problems}{_c('reset')} "
            f"{_c('error')}{total}{_c('reset')} ({fixable} {lbl_fixable})"
        )
    else:
        parts.append(f"  {_c('clean')}{config.get_str('labels.clean')}{_c('reset')}")
    parts.append(bar)
    return "\n".join(parts)


def format_reports_stderr(filepath: str, reports: list[Report]) -> str:
    """Format every report followed by the summary footer."""
    lines = [format_report_stderr(filepath, r) for r in reports]
    fixable = sum(1 for r in reports if r.fix is not None)
    lines.append(format_summary_stderr(filepath, len(reports), fixable))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def format_reports_json(filepath: str, reports: list[Report]) -> dict[str, Any]:
    """Format all reports as a JSON-compatible dict.

    Returns:
        Dict suitable for json.dumps().
    """
    status_clean = config.get_str("statuses.clean")
    status_violations = config.get_str("statuses.violations")
    return {
        "status": status_violations if reports else status_clean,
        "file": filepath,
        "reports": [report_to_dict(r) for r in reports],
        "summary": {
            "total": len(reports),
            "fixable": sum(1 for r in reports if r.fix is not None),
        },
    }

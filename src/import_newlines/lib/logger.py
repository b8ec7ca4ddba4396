"""logger — JSONL lint telemetry.

Each linted file appends a single JSON line to ``lint_log.jsonl`` inside the
configured log directory.  An entry captures the file path, status, a short
summary of every report, the number of declarations inspected, a truncated
SHA-256 hash of the source, and timing.  Formatting constants come from
``config/defaults.yaml``.
"""

from __future__ import annotations

import datetime
import hashlib
import json
import os
from typing import Any

from import_newlines.lib import config


def log_lint(
    log_dir: str,
    filepath: str,
    status: str,
    reports_data: list[dict[str, Any]],
    declaration_count: int,
    source: str,
    scan_ms: int,
    fixed_count: int = 0,
) -> None:
    """Write a JSONL log entry for one linted file.

    Args:
        log_dir: Directory to write the log file in. Nothing is written
            when empty.
        filepath: Path to the linted file.
        status: ``clean`` or ``violations``.
        reports_data: Summary dicts, one per report.
        declaration_count: Number of import declarations inspected.
        source: The source text that was linted.
        scan_ms: Lint duration in milliseconds.
        fixed_count: Number of fixes applied in this run.
    """
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, config.get_str("filenames.lint_log"))

    utc_src = config.get_str("formatting.utc_offset_source")
    utc_rep = config.get_str("formatting.utc_offset_replacement")
    hash_prefix = config.get_str("formatting.hash_prefix")
    hash_trunc = config.get_int("defaults.hash_truncation_length")
    separators = tuple(config.get_list("formatting.json_separators"))

    entry: dict[str, Any] = {
        "timestamp": (
            datetime.datetime.now(datetime.timezone.utc)
            .isoformat()
            .replace(utc_src, utc_rep)
        ),
        "event": "lint",
        "file": filepath,
        "status": status,
        "reports": reports_data,
        "declarations": declaration_count,
        "fixed": fixed_count,
        "code_length_lines": len(source.splitlines()),
        "code_hash": hash_prefix + hashlib.sha256(source.encode()).hexdigest()[:hash_trunc],
        "scan_ms": scan_ms,
    }

    with open(log_path, "a", encoding="utf-8") as fh:
        fh.write(json.dumps(entry, separators=separators) + "\n")

"""import-newlines engine — thin orchestrator for one file pass.

Normalises the options once, converts the host AST into import
declarations, runs the rule chain against each of them, and optionally
applies the resulting fixes.  This is the main entry point for programmatic
usage.

Design notes:
    The engine never looks at JavaScript syntax directly.  It delegates to
    lib/estree for declaration models, to lib/rules for decisions and to
    lib/fixes for rewriting, which keeps this module a pure orchestration
    layer.  Options are validated before the first declaration is read, so
    a configuration error aborts the pass with no partial results.
"""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Iterable

from import_newlines.lib import config
from import_newlines.lib.estree import declarations_from_program
from import_newlines.lib.fixes import apply_fixes
from import_newlines.lib.formatter import (
    format_reports_json,
    format_reports_stderr,
)
from import_newlines.lib.logger import log_lint
from import_newlines.lib.models import ImportDeclaration
from import_newlines.lib.options import RawOptions, normalize_options
from import_newlines.lib.rules import Report, inspect_declaration


@dataclass
class LintResult:
    """Result of linting one file."""

    status: str
    filepath: str = ""
    reports: list[Report] = field(default_factory=list)
    output: str = ""
    declaration_count: int = 0
    fixed_count: int = 0
    scan_ms: int = 0


def lint_declarations(
    declarations: Iterable[ImportDeclaration],
    options: RawOptions = None,
) -> list[Report]:
    """Inspect every declaration and collect the reports.

    Args:
        declarations: Declarations from any host binding.
        options: Raw options in either accepted shape, or a Policy.

    Returns:
        Reports in declaration order, at most one per declaration.

    Raises:
        OptionsError: If the options are invalid.
    """
    policy = normalize_options(options)
    reports: list[Report] = []
    for declaration in declarations:
        report = inspect_declaration(declaration, policy)
        if report is not None:
            reports.append(report)
    return reports


def lint_source(
    source: str,
    program: dict[str, Any],
    options: RawOptions = None,
    *,
    filepath: str = "<input>",
    fix: bool = False,
    log_dir: str = "",
) -> LintResult:
    """Lint the import declarations of one source file.

    Args:
        source: JavaScript or TypeScript source text.
        program: ESTree ``Program`` for ``source``.
        options: Raw options in either accepted shape.
        filepath: Path used in output and logs.
        fix: Apply fixes and return the rewritten text in ``output``.
        log_dir: When set, append a JSONL entry to the lint log there.

    Returns:
        LintResult with reports, status and, when fixing, the new source.

    Raises:
        OptionsError: If the options are invalid.
        AstInputError: If ``program`` cannot be read.
    """
    start = time.time()
    policy = normalize_options(options)
    declarations = list(declarations_from_program(program, source, filepath))
    reports = lint_declarations(declarations, policy)

    output = source
    fixed_count = 0
    if fix and reports:
        output, fixed_count = apply_fixes(
            source, [r.fix for r in reports if r.fix is not None]
        )

    remaining = len(reports) - fixed_count
    status = config.get_str(
        "statuses.violations" if remaining > 0 else "statuses.clean"
    )
    scan_ms = int((time.time() - start) * 1000)

    if log_dir:
        log_lint(
            log_dir,
            filepath,
            status,
            [
                {"messageId": r.message_id, "line": r.line}
                for r in reports
            ],
            len(declarations),
            source,
            scan_ms,
            fixed_count,
        )

    return LintResult(
        status=status,
        filepath=filepath,
        reports=reports,
        output=output,
        declaration_count=len(declarations),
        fixed_count=fixed_count,
        scan_ms=scan_ms,
    )


def write_result(result: LintResult, output_format: str = "") -> None:
    """Write a LintResult to stderr in the requested format."""
    if not output_format:
        output_format = config.get_str("formats.default")
    if output_format == config.get_str("formats.json"):
        data = format_reports_json(result.filepath, result.reports)
        data["status"] = result.status
        data["fixed"] = result.fixed_count
        json_indent = config.get_int("defaults.json_indent")
        sys.stderr.write(json.dumps(data, indent=json_indent) + "\n")
        return
    sys.stderr.write(format_reports_stderr(result.filepath, result.reports) + "\n")
    if result.fixed_count:
        msg = config.get_str("messages.fixed_summary")
        sys.stderr.write(
            msg.format(count=result.fixed_count, filepath=result.filepath) + "\n"
        )

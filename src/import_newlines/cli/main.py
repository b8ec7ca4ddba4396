"""import-newlines CLI entry point — argument parsing and command dispatch.

Usage::

    import-newlines check src/app.js --ast build/app.ast.json [--fix]
    import-newlines check src/app.js --ast app.json --config .import_newlines.yaml --format json
    import-newlines messages

The AST must be an ESTree ``Program`` with ``loc`` information, as produced
by espree, acorn, babel or typescript-estree.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Optional

import yaml

from import_newlines import __version__
from import_newlines.engine import lint_source, write_result
from import_newlines.exceptions import AstInputError, OptionsError
from import_newlines.lib import config
from import_newlines.lib.estree import load_program
from import_newlines.lib.project import (
    ProjectConfig,
    load_project_config,
    validate_project_config,
)


def _load_project(path: Optional[str]) -> Optional[ProjectConfig]:
    """Load and validate the project config, writing errors to stderr."""
    if path is None:
        path = config.get_str("defaults.config_filename")
        if not os.path.isfile(path):
            return ProjectConfig()
    elif not os.path.isfile(path):
        sys.stderr.write(f"Config file not found: {path}\n")
        return None
    try:
        data = load_project_config(path)
    except yaml.YAMLError as exc:
        msg = config.get_str("messages.config_error")
        sys.stderr.write(msg.format(error=exc) + "\n")
        return None
    if data is None:
        return ProjectConfig()
    errors = validate_project_config(data)
    if errors:
        msg = config.get_str("messages.config_error")
        for error in errors:
            sys.stderr.write(msg.format(error=error) + "\n")
        return None
    return ProjectConfig.from_dict(data)


def cmd_check(args: Any) -> int:
    """Lint one file and optionally rewrite it in place."""
    exit_error = config.get_int("exit_codes.error")

    project = _load_project(args.config)
    if project is None:
        return exit_error

    log_dir = project.logging.directory if project.logging.enabled else ""
    try:
        with open(args.source, "r", encoding="utf-8") as fh:
            source = fh.read()
        program = load_program(args.ast)
        result = lint_source(
            source,
            program,
            project.options,
            filepath=args.source,
            fix=args.fix,
            log_dir=log_dir,
        )
    except OptionsError as exc:
        msg = config.get_str("messages.config_error")
        sys.stderr.write(msg.format(error=exc) + "\n")
        return exit_error
    except (AstInputError, OSError) as exc:
        sys.stderr.write(f"  {exc}\n")
        return exit_error

    if args.fix and result.fixed_count:
        with open(args.source, "w", encoding="utf-8") as fh:
            fh.write(result.output)

    write_result(result, args.format)
    if result.status == config.get_str("statuses.violations"):
        return config.get_int("exit_codes.violations")
    return config.get_int("exit_codes.ok")


def cmd_messages(args: Any) -> int:
    """Print every message id with its template."""
    templates = config.get_dict("message_templates")
    for message_id in config.get_dict("message_ids").values():
        sys.stdout.write(f"{message_id}: {templates[message_id]}\n")
    return config.get_int("exit_codes.ok")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse tree, one sub-parser per subcommand."""
    prog = config.get_str("cli.prog_name")
    fmt_stderr = config.get_str("formats.stderr")
    fmt_json = config.get_str("formats.json")

    parser = argparse.ArgumentParser(
        prog=prog, description=config.get_str("cli.description")
    )
    parser.add_argument(
        "--version", action="version", version=f"{prog} {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sub_check = subparsers.add_parser(
        "check", help="Check the import layout of a source file"
    )
    sub_check.add_argument("source", help="JavaScript or TypeScript source file")
    sub_check.add_argument(
        "--ast", required=True, help="ESTree JSON for the source file"
    )
    sub_check.add_argument(
        "--config",
        help=(
            "Project config file (default: "
            f"{config.get_str('defaults.config_filename')} if present)"
        ),
    )
    sub_check.add_argument(
        "--format",
        choices=[fmt_stderr, fmt_json],
        default=config.get_str("formats.default"),
        help="Output format",
    )
    sub_check.add_argument(
        "--fix", action="store_true", help="Rewrite the source file in place"
    )

    subparsers.add_parser("messages", help="List message ids and templates")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Parse arguments and dispatch to the matching command handler."""
    parser = build_parser()
    args = parser.parse_args(argv)

    dispatch = {
        "check": cmd_check,
        "messages": cmd_messages,
    }

    handler = dispatch.get(args.command)
    if handler is None:
        parser.print_help()
        return
    sys.exit(handler(args))


if __name__ == "__main__":
    main()

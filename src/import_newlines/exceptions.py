"""Custom exceptions for import-newlines.

Policy violations are never raised; they are returned as reports.  The
exceptions here cover the two situations where a run cannot proceed at all.

Exceptions:
    ImportNewlinesError — Base class for everything raised by the package.
    OptionsError — Raised when rule options are malformed or below their
        floors. Subclasses ValueError.
    AstInputError — Raised when the host-supplied AST cannot be turned into
        import declarations. Wraps the original error.
"""

from __future__ import annotations

from typing import Any

from import_newlines.lib import config


class ImportNewlinesError(Exception):
    """Base class for import-newlines errors."""


class OptionsError(ImportNewlinesError, ValueError):
    """Raised when rule options fail validation.

    Raised before any declaration is inspected, so a bad configuration
    aborts the whole run instead of producing partial results.
    """

    def __init__(self, message: str, option: str = "", value: Any = None) -> None:
        """Initialize with the offending option.

        Args:
            message: Human-readable description of the problem.
            option: Name of the option that failed, if any.
            value: The rejected value.
        """
        self.option = option
        self.value = value
        super().__init__(message)


class AstInputError(ImportNewlinesError):
    """Raised when a host AST cannot be read as a Program.

    Carries the file path and the underlying exception so the CLI can
    report which input was unusable.
    """

    def __init__(self, filepath: str, original_error: Exception) -> None:
        """Initialize with input error details.

        Args:
            filepath: Path of the source file the AST belongs to.
            original_error: The underlying exception.
        """
        self.filepath = filepath
        self.original_error = original_error
        msg = config.get_str("errors.ast_input")
        super().__init__(msg.format(filepath=filepath, error=original_error))

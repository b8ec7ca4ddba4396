"""import-newlines — layout checker and fixer for multi-name import statements.

Stable public API:
    lint_source: Lint the imports of one source file given its ESTree AST.
    lint_declarations: Lint pre-built ImportDeclaration models.
    inspect_declaration: Run the rule chain against one declaration.
    build_replacement: Rebuild a declaration in collapsed or expanded form.
    normalize_options: Turn either option shape into a Policy.
    LintResult, Report, Fix, Policy, ImportDeclaration, Specifier: Data types.
    OptionsError, AstInputError: Exceptions raised before any report exists.
"""

__version__ = "0.1.0"

from import_newlines.engine import LintResult, lint_declarations, lint_source
from import_newlines.exceptions import AstInputError, ImportNewlinesError, OptionsError
from import_newlines.lib.fixer import build_replacement, render_specifier
from import_newlines.lib.models import ImportDeclaration, Specifier
from import_newlines.lib.options import Policy, normalize_options
from import_newlines.lib.rules import Fix, Report, inspect_declaration

__all__ = [
    "__version__",
    "lint_source",
    "lint_declarations",
    "inspect_declaration",
    "build_replacement",
    "render_specifier",
    "normalize_options",
    "LintResult",
    "Report",
    "Fix",
    "Policy",
    "ImportDeclaration",
    "Specifier",
    "ImportNewlinesError",
    "OptionsError",
    "AstInputError",
]

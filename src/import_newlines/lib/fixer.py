"""fixer — replacement text synthesis for import declarations.

``render_specifier`` turns one specifier into its canonical text and
``build_replacement`` rebuilds a whole declaration around a spacer: a newline
yields the expanded one-name-per-line form, a single space yields the
collapsed form.

Comments inside the original braces are not carried into the output.  The
comment map is accepted so callers can pass it through unchanged, but it is
not consulted; any applied fix strips interior comments.
"""

from __future__ import annotations

from typing import Mapping, Optional

from import_newlines.lib import config
from import_newlines.lib.models import Comment, ImportDeclaration, Specifier


def render_specifier(specifier: Specifier) -> str:
    """Return the source form of a single specifier.

    Args:
        specifier: The specifier to render.

    Returns:
        ``local`` for default imports, ``* as local`` for namespace imports,
        ``imported`` or ``imported as local`` for named imports.
    """
    if specifier.kind == config.get_str("specifiers.namespace"):
        return f"* as {specifier.local}"
    if specifier.imported is None:
        return specifier.local
    if specifier.imported != specifier.local:
        text = f"{specifier.imported} as {specifier.local}"
    else:
        text = specifier.imported
    if specifier.import_kind == config.get_str("import_kinds.type"):
        text = f"type {text}"
    return text


def build_replacement(
    declaration: ImportDeclaration,
    spacer: str,
    *,
    include_semicolon: bool = True,
    comment_map: Optional[Mapping[int, Comment]] = None,
) -> str:
    """Rebuild the full text of a declaration.

    Args:
        declaration: The declaration to rewrite.
        spacer: ``"\\n"`` for the expanded form, ``" "`` for the collapsed one.
        include_semicolon: Append a trailing ``;``.
        comment_map: Comments keyed by start offset; currently unused.

    Returns:
        Replacement text for the entire declaration.
    """
    leading = ""
    named: list[str] = []
    for specifier in declaration.specifiers:
        if specifier.is_named:
            named.append(render_specifier(specifier))
        else:
            leading = render_specifier(specifier)

    if leading and named:
        leading = f"{leading}, "
    block = ""
    if named:
        joined = ("," + spacer).join(named)
        block = "{" + spacer + joined + spacer + "}"

    keyword = "import"
    if declaration.import_kind == config.get_str("import_kinds.type"):
        keyword = "import type"
    semi = ";" if include_semicolon else ""

    if not leading and not block:
        return f"{keyword} {declaration.source_raw}{semi}"
    return f"{keyword} {leading}{block} from {declaration.source_raw}{semi}"

"""Shared fixtures for the import-newlines test suite.

The rule engine consumes declaration models, not JavaScript, so tests need
a way to describe declarations concisely.  ``build_declaration`` derives a
model from a snippet of import syntax by locating identifiers with simple
regular expressions; it understands exactly the import forms used in the
tests and nothing more.  ``estree_program`` wraps the same scan into the
ESTree JSON shape the engine and CLI read.
"""

from __future__ import annotations

import re
from typing import Any, Optional

import pytest

from import_newlines.lib import config
from import_newlines.lib.models import (
    Comment,
    ImportDeclaration,
    Position,
    SourceSpan,
    Specifier,
)

_IDENT = r"[A-Za-z_$][\w$]*"
_COMMENT_RE = re.compile(r"//[^\n]*|/\*.*?\*/", re.S)
_HEAD_RE = re.compile(r"import(\s+type)?\s+")
_FROM_RE = re.compile(r"\bfrom\s+(['\"][^'\"]*['\"])")
_BARE_RE = re.compile(r"(['\"][^'\"]*['\"])")
_NAMESPACE_RE = re.compile(rf"\*\s+as\s+({_IDENT})")
_DEFAULT_RE = re.compile(_IDENT)
_NAMED_RE = re.compile(
    rf"(?:\b(type)\s+(?=[A-Za-z_$]))?({_IDENT})(?:\s+as\s+({_IDENT}))?"
)
_STATEMENT_RE = re.compile(r"^import\b.*?['\"][^'\"]*['\"];?", re.S | re.M)


def _position(source: str, offset: int) -> Position:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1)
    return Position(line=line, column=column)


def _span(source: str, start: int, end: int) -> SourceSpan:
    return SourceSpan(start=_position(source, start), end=_position(source, end))


def _mask_comments(
    source: str, start: int, end: int
) -> tuple[str, tuple[Comment, ...]]:
    """Blank out comments (keeping newlines) and collect them."""
    chars = list(source)
    comments: list[Comment] = []
    for m in _COMMENT_RE.finditer(source, start, end):
        raw = m.group(0)
        if raw.startswith("//"):
            kind, value = "Line", raw[2:]
        else:
            kind, value = "Block", raw[2:-2]
        comments.append(Comment(
            value=value,
            kind=kind,
            span=_span(source, m.start(), m.end()),
            offset=m.start(),
        ))
        for i in range(m.start(), m.end()):
            if chars[i] != "\n":
                chars[i] = " "
    return "".join(chars), tuple(comments)


def build_declaration(
    source: str, start: int = 0, end: Optional[int] = None
) -> ImportDeclaration:
    """Describe the import statement at ``source[start:end]``."""
    if end is None:
        end = len(source)
    masked, comments = _mask_comments(source, start, end)
    head = _HEAD_RE.match(masked, start)
    assert head is not None, f"not an import: {source[start:end]!r}"
    import_kind = "type" if head.group(1) else "value"
    pos = head.end()

    specifiers: list[Specifier] = []
    from_matches = list(_FROM_RE.finditer(masked, pos, end))
    if from_matches:
        source_raw = from_matches[-1].group(1)
        clause_end = from_matches[-1].start()
        brace = masked.find("{", pos, clause_end)
        lead_end = brace if brace != -1 else clause_end
        ns = _NAMESPACE_RE.search(masked, pos, lead_end)
        if ns:
            specifiers.append(Specifier(
                kind=config.get_str("specifiers.namespace"),
                local=ns.group(1),
                imported=None,
                span=_span(source, ns.start(), ns.end()),
            ))
        else:
            dm = _DEFAULT_RE.search(masked, pos, lead_end)
            if dm:
                specifiers.append(Specifier(
                    kind=config.get_str("specifiers.default"),
                    local=dm.group(0),
                    imported=None,
                    span=_span(source, dm.start(), dm.end()),
                ))
        if brace != -1:
            close = masked.find("}", brace, clause_end)
            for nm in _NAMED_RE.finditer(masked, brace + 1, close):
                imported = nm.group(2)
                specifiers.append(Specifier(
                    kind=config.get_str("specifiers.named"),
                    local=nm.group(3) or imported,
                    imported=imported,
                    span=_span(source, nm.start(), nm.end()),
                    import_kind="type" if nm.group(1) else "value",
                ))
    else:
        bare = _BARE_RE.search(masked, pos, end)
        assert bare is not None
        source_raw = bare.group(1)

    return ImportDeclaration(
        specifiers=tuple(specifiers),
        span=_span(source, start, end),
        source_raw=source_raw,
        import_kind=import_kind,
        comments=comments,
        text=source[start:end],
        range=(start, end),
    )


def scan_imports(source: str) -> list[ImportDeclaration]:
    """Describe every import statement that starts at a line start."""
    return [
        build_declaration(source, m.start(), m.end())
        for m in _STATEMENT_RE.finditer(source)
    ]


# ---------------------------------------------------------------------------
# ESTree conversion
# ---------------------------------------------------------------------------


def _loc(span: SourceSpan) -> dict[str, Any]:
    return {
        "start": {"line": span.start.line, "column": span.start.column},
        "end": {"line": span.end.line, "column": span.end.column},
    }


def _estree_specifier(spec: Specifier) -> dict[str, Any]:
    node: dict[str, Any] = {
        "type": spec.kind,
        "local": {"type": "Identifier", "name": spec.local},
        "loc": _loc(spec.span),
    }
    if spec.imported is not None:
        node["imported"] = {"type": "Identifier", "name": spec.imported}
        node["importKind"] = spec.import_kind
    return node


def to_estree(declaration: ImportDeclaration) -> dict[str, Any]:
    """Render a declaration model as an ESTree ImportDeclaration node."""
    return {
        "type": "ImportDeclaration",
        "importKind": declaration.import_kind,
        "range": list(declaration.range),
        "loc": _loc(declaration.span),
        "specifiers": [_estree_specifier(s) for s in declaration.specifiers],
        "source": {
            "type": "Literal",
            "raw": declaration.source_raw,
            "value": declaration.source_raw[1:-1],
        },
    }


def estree_program(source: str) -> dict[str, Any]:
    """Build an ESTree Program holding the imports found in ``source``."""
    comments = []
    for m in _COMMENT_RE.finditer(source):
        raw = m.group(0)
        line_comment = raw.startswith("//")
        comments.append({
            "type": "Line" if line_comment else "Block",
            "value": raw[2:] if line_comment else raw[2:-2],
            "range": [m.start(), m.end()],
            "loc": _loc(_span(source, m.start(), m.end())),
        })
    return {
        "type": "Program",
        "sourceType": "module",
        "body": [to_estree(d) for d in scan_imports(source)],
        "comments": comments,
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def declaration():
    """Return the declaration builder."""
    return build_declaration


@pytest.fixture()
def scan():
    """Return the whole-source import scanner."""
    return scan_imports


@pytest.fixture()
def program():
    """Return the ESTree program builder."""
    return estree_program


@pytest.fixture()
def sample_source() -> str:
    """A module with one compliant and two non-compliant imports."""
    return (
        'import React from "react";\n'
        'import { a, b, c, d, e } from "letters";\n'
        "import {\n"
        "  useState,\n"
        "  useEffect\n"
        '} from "react";\n'
        "\n"
        "export const x = 1;\n"
    )

"""estree — build ImportDeclaration models from an ESTree JSON program.

This is the bundled host binding.  It accepts the JSON emitted by any
ESTree-compatible parser (espree, acorn, babel, typescript-estree) with
``loc`` enabled, plus the source text, and yields one ``ImportDeclaration``
per top-level import statement.  Offsets are taken from ``range`` or
``start``/``end`` when present and computed from ``loc`` otherwise; all of
them are UTF-16 positions and are translated to string indices through
``SourceIndex`` before the source is sliced.

The module never parses JavaScript itself.
"""

from __future__ import annotations

import bisect
import json
from typing import Any, Iterator, Optional

from import_newlines.exceptions import AstInputError
from import_newlines.lib import config
from import_newlines.lib.models import (
    Comment,
    ImportDeclaration,
    SourceSpan,
    Specifier,
)


def line_starts(source: str) -> list[int]:
    """Return the absolute offset at which each line begins."""
    starts = [0]
    for index, char in enumerate(source):
        if char == "\n":
            starts.append(index + 1)
    return starts


class SourceIndex:
    """Translate parser positions into Python string indices.

    JavaScript parsers count offsets and columns in UTF-16 code units, so
    every character outside the Basic Multilingual Plane occupies two units
    but a single Python index.  Sources without such characters map
    one-to-one and skip the table entirely.
    """

    def __init__(self, source: str) -> None:
        self.starts = line_starts(source)
        self._units: Optional[list[int]] = None
        if any(ord(char) > 0xFFFF for char in source):
            units = [0]
            for char in source:
                units.append(units[-1] + (2 if ord(char) > 0xFFFF else 1))
            self._units = units

    def index(self, offset: int) -> int:
        """Python index for a UTF-16 ``offset``."""
        if self._units is None:
            return offset
        return bisect.bisect_left(self._units, offset)

    def point(self, loc_point: dict[str, Any]) -> dict[str, int]:
        """Convert an ESTree ``{"line", "column"}`` point to a code-point column."""
        line = int(loc_point["line"])
        line_start = self.starts[line - 1]
        column = int(loc_point["column"])
        if self._units is not None:
            column = self.index(self._units[line_start] + column) - line_start
        return {"line": line, "column": column}

    def offset(self, loc_point: dict[str, Any]) -> int:
        """Absolute Python index of an ESTree ``loc`` point."""
        point = self.point(loc_point)
        return self.starts[point["line"] - 1] + point["column"]

    def position(self, index: int) -> dict[str, int]:
        """Line and column of an absolute Python index."""
        line = bisect.bisect_right(self.starts, index)
        return {"line": line, "column": index - self.starts[line - 1]}


def load_program(path: str) -> dict[str, Any]:
    """Read an ESTree JSON document from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        AstInputError: If the file is not valid JSON.
    """
    with open(path, "r", encoding="utf-8") as fh:
        try:
            return json.load(fh)
        except json.JSONDecodeError as exc:
            raise AstInputError(path, exc) from exc


def declarations_from_program(
    program: dict[str, Any],
    source: str,
    filepath: str = "<input>",
) -> Iterator[ImportDeclaration]:
    """Yield an ImportDeclaration for every import statement in ``program``.

    Args:
        program: ESTree ``Program`` node as decoded JSON.
        source: Source text the program was parsed from.
        filepath: Used in error messages only.

    Yields:
        Declarations in source order.

    Raises:
        AstInputError: If the root is not a Program or a node is malformed.
    """
    node_types = config.get_dict("node_types")
    if not isinstance(program, dict) or program.get("type") != node_types["program"]:
        found = program.get("type") if isinstance(program, dict) else type(program).__name__
        msg = config.get_str("errors.not_a_program").format(node_type=found)
        raise AstInputError(filepath, ValueError(msg))

    body = program.get("body")
    if not isinstance(body, list):
        msg = config.get_str("errors.missing_body")
        raise AstInputError(filepath, ValueError(msg))

    index = SourceIndex(source)
    program_comments = program.get("comments") or []
    for node in body:
        if not isinstance(node, dict) or node.get("type") != node_types["import_declaration"]:
            continue
        try:
            yield _declaration(node, source, index, program_comments)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            msg = config.get_str("errors.bad_node").format(
                node_type=node_types["import_declaration"], error=exc
            )
            raise AstInputError(filepath, ValueError(msg)) from exc


# ---------------------------------------------------------------------------
# Node conversion
# ---------------------------------------------------------------------------


def _offsets(node: dict[str, Any], index: SourceIndex) -> tuple[int, int]:
    """Absolute string indices of a node, computed from ``loc`` if not supplied."""
    if "range" in node:
        start, end = node["range"]
        return index.index(int(start)), index.index(int(end))
    if isinstance(node.get("start"), int) and isinstance(node.get("end"), int):
        return index.index(node["start"]), index.index(node["end"])
    loc = node["loc"]
    return index.offset(loc["start"]), index.offset(loc["end"])


def _span(node: dict[str, Any], index: SourceIndex) -> SourceSpan:
    """Source span of a node, computed from offsets if ``loc`` is missing."""
    if "loc" in node:
        loc = node["loc"]
        return SourceSpan.from_dict({
            "start": index.point(loc["start"]),
            "end": index.point(loc["end"]),
        })
    start, end = _offsets(node, index)
    return SourceSpan.from_dict({
        "start": index.position(start),
        "end": index.position(end),
    })


def _specifier(node: dict[str, Any], index: SourceIndex) -> Specifier:
    kind = node["type"]
    imported: Optional[str] = None
    if kind == config.get_str("specifiers.named"):
        imported_node = node["imported"]
        if imported_node.get("type") == config.get_str("node_types.literal"):
            imported = _raw(imported_node)
        else:
            imported = imported_node["name"]
    return Specifier(
        kind=kind,
        local=node["local"]["name"],
        imported=imported,
        span=_span(node, index),
        import_kind=node.get("importKind") or config.get_str("import_kinds.value"),
    )


def _raw(literal: dict[str, Any]) -> str:
    """Literal text as written; babel keeps it under ``extra.raw``."""
    if literal.get("raw"):
        return literal["raw"]
    extra = literal.get("extra") or {}
    if extra.get("raw"):
        return extra["raw"]
    return json.dumps(literal["value"])


def _comment(node: dict[str, Any], index: SourceIndex) -> Comment:
    kind = node.get("type", "")
    if kind.startswith("Comment"):
        kind = kind[len("Comment"):]
    return Comment(
        value=node.get("value", ""),
        kind=kind,
        span=_span(node, index),
        offset=_offsets(node, index)[0],
    )


def _declaration(
    node: dict[str, Any],
    source: str,
    index: SourceIndex,
    program_comments: list[dict[str, Any]],
) -> ImportDeclaration:
    start, end = _offsets(node, index)
    raw_comments = node.get("comments")
    if raw_comments is None:
        raw_comments = [
            c for c in program_comments if start <= _offsets(c, index)[0] < end
        ]
    return ImportDeclaration(
        specifiers=tuple(_specifier(s, index) for s in node["specifiers"]),
        span=_span(node, index),
        source_raw=_raw(node["source"]),
        import_kind=node.get("importKind") or config.get_str("import_kinds.value"),
        comments=tuple(_comment(c, index) for c in raw_comments),
        text=source[start:end],
        range=(start, end),
    )

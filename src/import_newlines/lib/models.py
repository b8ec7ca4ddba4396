"""Data models for import declarations as seen by the layout rules.

Typed, frozen dataclasses describing one import declaration: its
specifiers, their source positions, and any comments attached to it.  The
rules are written against these models only, so any parser binding can
supply them; ``import_newlines.lib.estree`` is the bundled binding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from import_newlines.lib import config


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Position:
    """A point in source text.

    Attributes:
        line: 1-based line number.
        column: 0-based column.
    """

    line: int
    column: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Position:
        """Build from an ESTree ``{"line": .., "column": ..}`` mapping."""
        return cls(line=int(data["line"]), column=int(data["column"]))


@dataclass(frozen=True)
class SourceSpan:
    """Start and end positions of a node."""

    start: Position
    end: Position

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SourceSpan:
        """Build from an ESTree ``loc`` mapping."""
        return cls(
            start=Position.from_dict(data["start"]),
            end=Position.from_dict(data["end"]),
        )

    @property
    def line_count(self) -> int:
        """Number of physical lines the span touches."""
        return 1 + self.end.line - self.start.line


# ---------------------------------------------------------------------------
# Declaration parts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Specifier:
    """One imported binding.

    Attributes:
        kind: ``ImportDefaultSpecifier``, ``ImportSpecifier`` or
            ``ImportNamespaceSpecifier``.
        local: Name of the local binding.
        imported: Exported name for named specifiers, ``None`` otherwise.
        span: Source span of the specifier.
        import_kind: ``type`` for inline ``{ type Foo }`` specifiers.
    """

    kind: str
    local: str
    imported: Optional[str]
    span: SourceSpan
    import_kind: str = "value"

    @property
    def is_named(self) -> bool:
        """True for ``{ ... }`` specifiers."""
        return self.kind == config.get_str("specifiers.named")


@dataclass(frozen=True)
class Comment:
    """A comment found inside a declaration.

    Attributes:
        value: Comment text without delimiters.
        kind: ``Line`` or ``Block``.
        span: Source span of the comment.
        offset: Absolute start offset in the source.
    """

    value: str
    kind: str
    span: SourceSpan
    offset: int


@dataclass(frozen=True)
class ImportDeclaration:
    """An import statement under evaluation.

    Attributes:
        specifiers: Specifiers in source order; a default one comes first.
        span: Source span of the whole statement.
        source_raw: Module specifier literal exactly as written, quotes included.
        import_kind: ``value`` or ``type``.
        comments: Comments attached to the statement.
        text: Source text of the whole statement.
        range: Absolute ``(start, end)`` offsets of the statement, if known.
    """

    specifiers: tuple[Specifier, ...]
    span: SourceSpan
    source_raw: str
    import_kind: str = "value"
    comments: tuple[Comment, ...] = field(default_factory=tuple)
    text: str = ""
    range: Optional[tuple[int, int]] = None

    @property
    def line_count(self) -> int:
        """Number of physical lines the statement spans."""
        return self.span.line_count

    @property
    def named_count(self) -> int:
        """Number of non-default, non-namespace specifiers."""
        return sum(1 for s in self.specifiers if s.is_named)

    @property
    def is_single_line(self) -> bool:
        return self.span.start.line == self.span.end.line

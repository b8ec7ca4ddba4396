"""rules — the ordered layout rule chain for import declarations.

Each rule is a plain function that receives an ``InspectionContext`` and
returns a ``Report`` or ``None``.  ``RULE_CHAIN`` lists them in priority
order and ``inspect_declaration()`` walks it top to bottom, stopping at the
first report, so a declaration never yields more than one report per pass.

Priority order:
    1. no_blank_between   blank line between two specifiers
    2. must_split_long    single line longer than ``max-len``
    3. must_split_many    single line with more than ``items`` named imports
    4. limit_line_count   multi-line span other than one line per name + 2
    5. must_not_split     multi-line import that fits on one line

Every rule checks its own preconditions, so each can be exercised alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from import_newlines.lib import config
from import_newlines.lib.fixer import build_replacement
from import_newlines.lib.models import Comment, ImportDeclaration
from import_newlines.lib.options import Policy


# ---------------------------------------------------------------------------
# Report types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fix:
    """A whole-declaration text replacement.

    Attributes:
        range: Absolute ``(start, end)`` offsets to replace, ``None`` when the
            host did not supply offsets.
        text: Replacement text.
    """

    range: Optional[tuple[int, int]]
    text: str


@dataclass(frozen=True)
class Report:
    """A single layout violation found on a declaration."""

    message_id: str
    line: int
    column: int
    data: dict[str, Any] = field(default_factory=dict)
    fix: Optional[Fix] = None

    @property
    def message(self) -> str:
        """The message template with ``data`` interpolated."""
        template = config.get_str(f"message_templates.{self.message_id}")
        return template.format_map(self.data)


@dataclass(frozen=True)
class InspectionContext:
    """Everything a rule may look at for one declaration."""

    declaration: ImportDeclaration
    policy: Policy
    comment_map: Mapping[int, Comment] = field(default_factory=dict)

    def replacement(self, spacer: str) -> str:
        return build_replacement(
            self.declaration,
            spacer,
            include_semicolon=self.policy.include_semicolon,
            comment_map=self.comment_map,
        )

    def report(
        self, id_key: str, data: dict[str, Any], fix_text: str
    ) -> Report:
        """Build a report anchored at the declaration start."""
        start = self.declaration.span.start
        return Report(
            message_id=config.get_str(f"message_ids.{id_key}"),
            line=start.line,
            column=start.column,
            data=data,
            fix=Fix(range=self.declaration.range, text=fix_text),
        )

    def expanded_report(self, id_key: str, data: dict[str, Any]) -> Report:
        return self.report(
            id_key, data, self.replacement(config.get_str("spacers.expanded"))
        )


Rule = Callable[[InspectionContext], Optional[Report]]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def check_no_blank_between(ctx: InspectionContext) -> Optional[Report]:
    """Report once if any two adjacent specifiers have a blank line between them."""
    specifiers = ctx.declaration.specifiers
    for previous, current in zip(specifiers, specifiers[1:]):
        if current.span.start.line - previous.span.end.line > 1:
            return ctx.expanded_report("no_blank_between", {})
    return None


def check_must_split_long(ctx: InspectionContext) -> Optional[Report]:
    """Single-line imports must fit within ``max-len``."""
    declaration = ctx.declaration
    if not declaration.is_single_line:
        return None
    length = len(declaration.text)
    if not ctx.policy.exceeds_line_length(length):
        return None
    return ctx.expanded_report(
        "must_split_long",
        {"maxLineLength": ctx.policy.max_line_length, "lineLength": length},
    )


def check_must_split_many(ctx: InspectionContext) -> Optional[Report]:
    """Single-line imports may hold at most ``items`` named imports."""
    declaration = ctx.declaration
    if not declaration.is_single_line:
        return None
    if declaration.named_count <= ctx.policy.max_items:
        return None
    return ctx.expanded_report("must_split_many", {"maxItems": ctx.policy.max_items})


def check_limit_line_count(ctx: InspectionContext) -> Optional[Report]:
    """Multi-line imports need one line per name plus the opening and closing lines."""
    declaration = ctx.declaration
    if declaration.is_single_line:
        return None
    expected = declaration.named_count + 2
    if declaration.line_count == expected:
        return None
    return ctx.expanded_report(
        "limit_line_count",
        {"expectedLineCount": expected, "importLineCount": declaration.line_count},
    )


def check_must_not_split(ctx: InspectionContext) -> Optional[Report]:
    """Multi-line imports with few names must be collapsed, if the result fits."""
    declaration = ctx.declaration
    if declaration.is_single_line:
        return None
    if declaration.line_count != declaration.named_count + 2:
        return None
    if declaration.named_count > ctx.policy.max_items:
        return None
    collapsed = ctx.replacement(config.get_str("spacers.collapsed"))
    # Splitting stays mandatory when the one-line form would be too long.
    if ctx.policy.exceeds_line_length(len(collapsed)):
        return None
    return ctx.report("must_not_split", {"maxItems": ctx.policy.max_items}, collapsed)


RULE_CHAIN: tuple[Rule, ...] = (
    check_no_blank_between,
    check_must_split_long,
    check_must_split_many,
    check_limit_line_count,
    check_must_not_split,
)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_comment_map(
    declaration: ImportDeclaration, policy: Policy
) -> dict[int, Comment]:
    """Key the declaration's comments by offset when they are to be preserved."""
    if not policy.preserve_comments:
        return {}
    return {c.offset: c for c in declaration.comments}


def inspect_declaration(
    declaration: ImportDeclaration, policy: Policy
) -> Optional[Report]:
    """Run the rule chain against one declaration.

    Args:
        declaration: The import declaration to inspect.
        policy: Normalised options for the current file pass.

    Returns:
        The first report produced, or ``None`` if the layout is acceptable.
    """
    ctx = InspectionContext(
        declaration=declaration,
        policy=policy,
        comment_map=build_comment_map(declaration, policy),
    )
    for rule in RULE_CHAIN:
        report = rule(ctx)
        if report is not None:
            return report
    return None

"""fixes — apply whole-declaration replacements to source text.

Fixes are applied in a single pass ordered by start offset.  A fix that
overlaps one already applied is skipped and reported on stderr; running the
tool again picks it up once the source has been re-parsed.
"""

from __future__ import annotations

import sys
from typing import Iterable

from import_newlines.lib import config
from import_newlines.lib.rules import Fix


def apply_fixes(source: str, fixes: Iterable[Fix]) -> tuple[str, int]:
    """Apply non-overlapping fixes to ``source``.

    Args:
        source: Original source text.
        fixes: Fixes produced by the rule chain. Fixes without a range
            are ignored.

    Returns:
        Tuple of the rewritten source and the number of fixes applied.
    """
    ordered = sorted(
        (f for f in fixes if f.range is not None), key=lambda f: f.range
    )
    parts: list[str] = []
    cursor = 0
    applied = 0
    for fix in ordered:
        start, end = fix.range
        if start < cursor:
            msg = config.get_str("messages.fix_overlap")
            sys.stderr.write(msg.format(start=start, end=cursor) + "\n")
            continue
        parts.append(source[cursor:start])
        parts.append(fix.text)
        cursor = end
        applied += 1
    parts.append(source[cursor:])
    return "".join(parts), applied

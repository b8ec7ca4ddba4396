"""theme — ANSI colour roles for terminal output.

Colour definitions live under the ``theme`` key of ``config/defaults.yaml``
and are resolved lazily into a role-to-escape-code mapping on first use.
Colourisation is suppressed automatically when the output stream is not a
TTY, so piped and redirected output stays clean.
"""

from __future__ import annotations

import sys
from typing import Any, Optional

from import_newlines.lib import config


class Theme:
    """Lazy-loaded ANSI colour theme.

    Attributes:
        resolved: Mapping of semantic role names to ANSI escape codes.
    """

    def __init__(self) -> None:
        self._resolved: Optional[dict[str, str]] = None

    def _load(self) -> dict[str, str]:
        raw = config.get_dict("theme")
        ansi: dict[str, str] = raw.get("ansi", {})
        roles: dict[str, str] = raw.get("roles", {})
        resolved = {role: ansi.get(name, "") for role, name in roles.items()}
        for extra in ("bold", "dim", "reset"):
            resolved[extra] = ansi.get(extra, "")
        return resolved

    @property
    def resolved(self) -> dict[str, str]:
        """Return the role-to-code mapping, loading on first access."""
        if self._resolved is None:
            self._resolved = self._load()
        return self._resolved

    def code(self, role: str, *, stream: Any = None) -> str:
        """Return the raw ANSI escape code for a role.

        Args:
            role: Semantic role name.
            stream: The output stream to check for TTY. Defaults to sys.stderr.

        Returns:
            ANSI escape code string, or empty string if not a TTY.
        """
        target = stream or sys.stderr
        if not hasattr(target, "isatty") or not target.isatty():
            return ""
        return self.resolved.get(role, "")

    def colorize(self, text: str, role: str, *, stream: Any = None) -> str:
        """Wrap text in the codes for ``role``, or return it unchanged off-TTY."""
        prefix = self.code(role, stream=stream)
        if not prefix:
            return text
        return f"{prefix}{text}{self.code('reset', stream=stream)}"


_theme = Theme()


def colorize(text: str, role: str, *, stream: Any = None) -> str:
    """Colourise ``text`` using the global theme."""
    return _theme.colorize(text, role, stream=stream)


def code(role: str, *, stream: Any = None) -> str:
    """Return the raw ANSI escape code for ``role`` from the global theme."""
    return _theme.code(role, stream=stream)

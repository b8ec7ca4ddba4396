"""config — package constants read from ``config/defaults.yaml``.

Specifier kinds, option defaults and floors, spacers, message templates,
exit codes and output labels all live in the YAML file next to this
package.  It is parsed once, on the first lookup, and the parsed mapping is
shared read-only by every module.

Lookups use dotted paths (``"options.floors.max_len"``).  The typed helpers
raise ``TypeError`` when the YAML holds the wrong kind of value, so a bad
edit to the defaults file surfaces at the call that depends on it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

_DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"

_cache: Optional[dict[str, Any]] = None


def load_defaults() -> dict[str, Any]:
    """Return the parsed defaults mapping, reading the file on first use.

    Raises:
        FileNotFoundError: If defaults.yaml is missing.
        yaml.YAMLError: If defaults.yaml is not valid YAML.
        TypeError: If the document is not a mapping.
    """
    global _cache  # noqa: PLW0603
    if _cache is not None:
        return _cache
    with open(_DEFAULTS_PATH, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if not isinstance(data, dict):
        raise TypeError(f"defaults.yaml must hold a mapping, got {type(data).__name__}")
    _cache = data
    return _cache


def get(dotted_key: str) -> Any:
    """Look up ``dotted_key`` in the defaults.

    Raises:
        KeyError: Naming the first path segment that is absent.
    """
    node: Any = load_defaults()
    for segment in dotted_key.split("."):
        if not isinstance(node, dict) or segment not in node:
            raise KeyError(
                f"Config key not found: {dotted_key!r} (missing segment: {segment!r})"
            )
        node = node[segment]
    return node


def _typed(dotted_key: str, expected: type) -> Any:
    value = get(dotted_key)
    # bool is an int subclass but never a valid count or code.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise TypeError(
            f"Expected {expected.__name__} for {dotted_key!r}, "
            f"got {type(value).__name__}"
        )
    return value


def get_str(dotted_key: str) -> str:
    return _typed(dotted_key, str)


def get_int(dotted_key: str) -> int:
    return _typed(dotted_key, int)


def get_list(dotted_key: str) -> list[Any]:
    return _typed(dotted_key, list)


def get_dict(dotted_key: str) -> dict[str, Any]:
    return _typed(dotted_key, dict)


def reset() -> None:
    """Forget the parsed defaults so the next lookup re-reads the file."""
    global _cache  # noqa: PLW0603
    _cache = None

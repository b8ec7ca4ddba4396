"""options — rule option normalisation and floor validation.

Options arrive in one of two shapes:

* object form: ``{"items": 4, "max-len": 100, "semi": true, "comments": "strip"}``,
  either bare or wrapped in a one-element list;
* legacy positional form: ``[items, max-len]`` with zero to two numbers.

Both are normalised into a single immutable ``Policy`` at entry so the rules
never see the raw shapes.  Values below their floors raise ``OptionsError``
before any declaration is inspected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from import_newlines.exceptions import OptionsError
from import_newlines.lib import config


@dataclass(frozen=True)
class Policy:
    """Normalised rule options for one file pass.

    Attributes:
        max_items: Named imports allowed on one line.
        max_line_length: Longest allowed single-line import, ``None`` for
            unbounded.
        include_semicolon: Whether fixes end with ``;``.
        comments: ``strip`` or ``preserve``.
    """

    max_items: int = 4
    max_line_length: Optional[int] = None
    include_semicolon: bool = True
    comments: str = "strip"

    @property
    def preserve_comments(self) -> bool:
        return self.comments == "preserve"

    def exceeds_line_length(self, length: int) -> bool:
        """Return True if ``length`` is over the configured maximum."""
        return self.max_line_length is not None and length > self.max_line_length


RawOptions = Union[None, Policy, dict, Sequence[Any]]


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


def normalize_options(raw: RawOptions) -> Policy:
    """Normalise raw options of either accepted shape into a Policy.

    Args:
        raw: ``None``, a mapping, a one-element list holding a mapping, a
            list of up to two numbers, or an existing Policy.

    Returns:
        Validated Policy.

    Raises:
        OptionsError: If the shape is unknown or a value is invalid.
    """
    if raw is None:
        return _build_policy({})
    if isinstance(raw, Policy):
        _check_comments(raw.comments)
        _check_floors(raw.max_items, raw.max_line_length)
        return raw
    if isinstance(raw, dict):
        return _build_policy(raw)
    if isinstance(raw, (list, tuple)):
        if raw and isinstance(raw[0], dict):
            if len(raw) != 1:
                msg = config.get_str("errors.mixed_positional")
                raise OptionsError(msg)
            return _build_policy(raw[0])
        return _build_positional(raw)
    msg = config.get_str("errors.bad_options_shape")
    raise OptionsError(msg.format(type_name=type(raw).__name__))


def _build_positional(values: Sequence[Any]) -> Policy:
    """Handle the legacy ``[items, max-len]`` form."""
    limit = config.get_int("options.max_positional")
    if len(values) > limit:
        msg = config.get_str("errors.too_many_positional")
        raise OptionsError(msg.format(limit=limit, count=len(values)))
    keys = config.get_dict("options.keys")
    named: dict[str, Any] = {}
    for key, value in zip((keys["items"], keys["max_len"]), values):
        if isinstance(value, (dict, list, str)):
            raise OptionsError(config.get_str("errors.mixed_positional"), key, value)
        named[key] = value
    return _build_policy(named)


def _build_policy(data: dict[str, Any]) -> Policy:
    """Handle the object form, filling defaults for absent keys."""
    keys = config.get_dict("options.keys")
    defaults = config.get_dict("options.defaults")

    for key in data:
        if key not in keys.values():
            msg = config.get_str("errors.unknown_option")
            raise OptionsError(msg.format(key=key), key)

    items = _integer(keys["items"], data.get(keys["items"]))
    max_len = _integer(keys["max_len"], data.get(keys["max_len"]))
    semi = data.get(keys["semi"])
    comments = data.get(keys["comments"])

    if items is None:
        items = defaults["items"]
    if semi is None:
        semi = defaults["semi"]
    elif not isinstance(semi, bool):
        msg = config.get_str("errors.option_not_boolean")
        raise OptionsError(
            msg.format(key=keys["semi"], type_name=type(semi).__name__),
            keys["semi"],
            semi,
        )
    if comments is None:
        comments = defaults["comments"]
    _check_comments(comments)

    _check_floors(items, max_len)
    return Policy(
        max_items=items,
        max_line_length=max_len,
        include_semicolon=semi,
        comments=comments,
    )


def _integer(key: str, value: Any) -> Optional[int]:
    """Coerce a numeric option to int; ``None`` and infinity mean unset."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = config.get_str("errors.option_not_integer")
        raise OptionsError(
            msg.format(key=key, type_name=type(value).__name__), key, value
        )
    if isinstance(value, float):
        if math.isinf(value) and value > 0:
            return None
        if not value.is_integer():
            msg = config.get_str("errors.option_not_integer")
            raise OptionsError(msg.format(key=key, type_name="float"), key, value)
        return int(value)
    return value


def _check_comments(comments: Any) -> None:
    """Raise OptionsError unless ``comments`` is a known mode."""
    modes = config.get_list("options.comment_modes")
    if comments not in modes:
        msg = config.get_str("errors.bad_comment_mode")
        key = config.get_str("options.keys.comments")
        raise OptionsError(msg.format(choices=modes, value=comments), key, comments)


def _check_floors(items: int, max_len: Optional[int]) -> None:
    """Raise OptionsError when a value is under its floor."""
    keys = config.get_dict("options.keys")
    items_floor = config.get_int("options.floors.items")
    len_floor = config.get_int("options.floors.max_len")
    if items < items_floor:
        msg = config.get_str("errors.items_below_floor")
        raise OptionsError(
            msg.format(floor=items_floor, value=items), keys["items"], items
        )
    if max_len is not None and max_len < len_floor:
        msg = config.get_str("errors.max_len_below_floor")
        raise OptionsError(
            msg.format(floor=len_floor, value=max_len), keys["max_len"], max_len
        )

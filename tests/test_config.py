"""Unit tests for import_newlines.lib.config defaults accessor."""

from __future__ import annotations

import pytest

from import_newlines.lib import config


class TestLoadDefaults:
    """Tests for config loading and caching."""

    def test_loads_successfully(self) -> None:
        """defaults.yaml loads without error."""
        assert isinstance(config.load_defaults(), dict)

    def test_cached_on_second_call(self) -> None:
        """Second call returns the same dict object."""
        assert config.load_defaults() is config.load_defaults()

    def test_reset_clears_cache(self) -> None:
        """reset() forces a fresh load on next call."""
        first = config.load_defaults()
        config.reset()
        second = config.load_defaults()
        assert first is not second
        assert first == second


class TestAccessors:
    """Tests for the dot-notation accessors."""

    def test_nested_string(self) -> None:
        """Nested strings resolve."""
        assert config.get_str("statuses.clean") == "clean"

    def test_nested_int(self) -> None:
        """Exit codes are integers."""
        assert config.get_int("exit_codes.violations") == 1

    def test_list(self) -> None:
        """Comment modes are a list."""
        assert config.get_list("options.comment_modes") == ["preserve", "strip"]

    def test_dict(self) -> None:
        """Message templates are a mapping keyed by message id."""
        templates = config.get_dict("message_templates")
        assert set(templates) == set(config.get_dict("message_ids").values())

    def test_missing_key(self) -> None:
        """Missing segments raise KeyError naming the segment."""
        with pytest.raises(KeyError, match="nope"):
            config.get("statuses.nope")

    def test_wrong_type(self) -> None:
        """Typed accessors raise TypeError on mismatch."""
        with pytest.raises(TypeError):
            config.get_int("statuses.clean")

    def test_bool_is_not_int(self) -> None:
        """Booleans are rejected by get_int."""
        with pytest.raises(TypeError):
            config.get_int("options.defaults.semi")

    def test_floors(self) -> None:
        """Option floors match the documented minimums."""
        assert config.get_int("options.floors.items") == 0
        assert config.get_int("options.floors.max_len") == 17

    def test_spacers(self) -> None:
        """The two spacers are a newline and a space."""
        assert config.get_str("spacers.expanded") == "\n"
        assert config.get_str("spacers.collapsed") == " "

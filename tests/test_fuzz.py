"""Fuzz tests for import-newlines robustness under random input."""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from import_newlines.exceptions import OptionsError
from import_newlines.lib import config
from import_newlines.lib.options import Policy, normalize_options
from import_newlines.lib.project import validate_project_config
from import_newlines.lib.rules import inspect_declaration
from conftest import build_declaration

_KEYWORDS = {"as", "type", "from", "import"}

names = st.lists(
    st.from_regex(r"[a-z][a-z0-9]{0,6}", fullmatch=True).filter(
        lambda s: s not in _KEYWORDS
    ),
    min_size=1,
    max_size=8,
    unique=True,
)

option_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-50, max_value=500),
    st.floats(allow_nan=True, allow_infinity=True),
    st.text(max_size=10),
)


class TestNormalizeOptionsFuzz:
    """Fuzz option normalisation with arbitrary shapes."""

    @given(
        st.one_of(
            st.dictionaries(
                keys=st.sampled_from(["items", "max-len", "semi", "comments", "other"]),
                values=option_values,
                max_size=5,
            ),
            st.lists(option_values, max_size=4),
            option_values,
        )
    )
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_policy_or_options_error(self, raw: object) -> None:
        """normalize_options returns a Policy or raises OptionsError."""
        try:
            policy = normalize_options(raw)
        except OptionsError:
            return
        assert isinstance(policy, Policy)
        assert policy.max_items >= config.get_int("options.floors.items")
        if policy.max_line_length is not None:
            assert policy.max_line_length >= config.get_int("options.floors.max_len")


class TestFixStabilityFuzz:
    """A fixed declaration is clean under the same options."""

    @given(names, st.integers(min_value=0, max_value=8))
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_single_line_fix_is_clean(self, specifiers: list[str], items: int) -> None:
        """Fixing a single-line import leaves nothing to report."""
        policy = normalize_options({"items": items})
        text = "import { " + ", ".join(specifiers) + ' } from "m";'
        report = inspect_declaration(build_declaration(text), policy)
        if len(specifiers) <= items:
            assert report is None
            return
        assert report is not None
        assert report.message_id == "mustSplitMany"
        fixed = report.fix.text
        assert fixed.count("\n") == len(specifiers) + 1
        assert inspect_declaration(build_declaration(fixed), policy) is None

    @given(names, st.integers(min_value=0, max_value=8))
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_expanded_fix_is_clean(self, specifiers: list[str], items: int) -> None:
        """An expanded import is either valid or collapses to a clean line."""
        policy = normalize_options({"items": items})
        text = "import {\n" + ",\n".join(specifiers) + '\n} from "m";'
        report = inspect_declaration(build_declaration(text), policy)
        if len(specifiers) > items:
            assert report is None
            return
        assert report is not None
        assert report.message_id == "mustNotSplit"
        assert "\n" not in report.fix.text
        assert inspect_declaration(build_declaration(report.fix.text), policy) is None


class TestValidateProjectConfigFuzz:
    """Fuzz validate_project_config with arbitrary YAML-like structures."""

    @given(
        st.one_of(
            st.none(),
            st.integers(),
            st.text(),
            st.dictionaries(
                keys=st.text(max_size=10),
                values=st.one_of(
                    st.none(),
                    st.booleans(),
                    st.integers(),
                    st.text(max_size=20),
                    st.dictionaries(keys=st.text(max_size=10), values=st.text(max_size=10)),
                ),
                max_size=5,
            ),
        )
    )
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_validate_returns_list_of_strings(self, data: object) -> None:
        """validate_project_config always returns a list of strings."""
        result = validate_project_config(data)
        assert isinstance(result, list)
        assert all(isinstance(item, str) for item in result)

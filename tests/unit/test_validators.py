"""
Unit tests for custom value formats and label schemes.

Includes property-based testing with hypothesis.
"""

import re
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from atomic_builder.core.rules.labels import (
    LABEL_SCHEMES,
    MAX_GROUPS,
    alphabet_label,
    check_label_scheme,
    numeric_label,
)
from atomic_builder.core.validators import (
    FORMAT_REGISTRY,
    AnyFormat,
    BorderFormat,
    ColorFormat,
    FormatValidationError,
    LengthFormat,
    NumberFormat,
    RegexFormat,
    resolve_format,
)


class TestColorFormat:
    """Tests for ColorFormat"""

    @pytest.mark.parametrize("value", ["#000", "#a1b2c3", "#A1B2C3CC", "rgba(0, 0, 0, .5)", "hsl(0, 0%, 10%)", "red", "transparent", "RebeccaPurple", "darkslategray"])
    def test_valid_colors(self, value):
        assert ColorFormat()(value) is True

    @pytest.mark.parametrize("value", ["#12", "#ggg", "1px", "", None, 12, "notacolor", "solid"])
    def test_invalid_colors(self, value):
        assert ColorFormat()(value) is False

    @given(st.from_regex(r"#[0-9a-fA-F]{6}", fullmatch=True))
    def test_property_any_six_digit_hex_passes(self, value):
        """Property test: every six digit hex color is accepted"""
        assert ColorFormat().matches(value)


class TestLengthFormat:
    """Tests for LengthFormat"""

    @pytest.mark.parametrize("value", ["0", "10px", "-1.5em", ".5rem", "50%", "auto"])
    def test_valid_lengths(self, value):
        assert LengthFormat()(value) is True

    @pytest.mark.parametrize("value", ["px", "10 px", "ten", "10pxx", None])
    def test_invalid_lengths(self, value):
        assert LengthFormat()(value) is False


class TestNumberFormat:
    def test_numbers(self):
        assert NumberFormat()("1.5") is True
        assert NumberFormat()("-2") is True
        assert NumberFormat()("2px") is False


class TestBorderFormat:
    """Tests for BorderFormat"""

    @pytest.mark.parametrize("value", ["1px solid #000001", "solid", "2px dashed", "none", "dotted red"])
    def test_valid_borders(self, value):
        assert BorderFormat()(value) is True

    @pytest.mark.parametrize("value", ["1px #000", "solid dashed", "red solid 1px", "1px solid red extra", "", "1px solid bogus"])
    def test_invalid_borders(self, value):
        assert BorderFormat()(value) is False


class TestAnyAndRegexFormat:
    def test_any_format(self):
        assert AnyFormat()("anything") is True
        assert AnyFormat()("  ") is False

    def test_regex_format_full_match(self):
        fmt = RegexFormat(r"\d+ms")

        assert fmt("300ms") is True
        assert fmt("300ms ease") is False

    def test_regex_format_compiled_pattern(self):
        assert RegexFormat(re.compile(r"[a-z]+"))("abc") is True

    def test_regex_format_invalid_pattern(self):
        with pytest.raises(ValueError):
            RegexFormat("[unclosed")


class TestResolveFormat:
    """Tests for resolve_format()"""

    def test_resolve_registered_name(self):
        assert resolve_format("color") is FORMAT_REGISTRY["color"]

    def test_resolve_callable(self):
        assert resolve_format(str.isdigit) is str.isdigit

    def test_resolve_regex_mapping(self):
        predicate = resolve_format({"regex": "[0-9]+s"})

        assert isinstance(predicate, RegexFormat)
        assert predicate("2s") is True

    def test_unknown_name_raises_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            resolve_format("colour")

        assert "colour" in str(exc_info.value)

    def test_malformed_entry_raises_value_error(self):
        with pytest.raises(ValueError):
            resolve_format(42)


class TestFormatValidationError:
    def test_error_carries_context(self):
        error = FormatValidationError("border", "b", "x", 1, "1px")

        assert error.obj_id == "border"
        assert "position 1" in str(error)
        assert "'1px'" in str(error)


class TestLabelSchemes:
    """Tests for custom-pattern label schemes"""

    def test_alphabet_labels(self):
        assert [alphabet_label(i) for i in range(MAX_GROUPS)] == list(string.ascii_lowercase)

    def test_numeric_labels(self):
        assert numeric_label(0) == "1"
        assert numeric_label(25) == "26"

    @pytest.mark.parametrize("name", sorted(LABEL_SCHEMES))
    def test_builtin_schemes_are_usable(self, name):
        check_label_scheme(name, LABEL_SCHEMES[name])

    def test_colliding_scheme_rejected(self):
        with pytest.raises(ValueError):
            check_label_scheme("halves", lambda index: str(index // 2))

    def test_unsafe_scheme_rejected(self):
        with pytest.raises(ValueError):
            check_label_scheme("dotted", lambda index: f"{index}.x")

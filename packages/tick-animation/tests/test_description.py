"""Tests for animation description parsing, serialization and equality."""

import pytest
from tick_animation import (
    AnimationDescription,
    CubicBezier,
    NamedEasing,
    description_to_string,
    parse_description,
)
from tick_animation.easing import linear


def make(length_ms, easing_name, easing=linear):
    return AnimationDescription(length_ms=length_ms, easing_name=easing_name, easing=easing)


class TestParseLegacy:
    def test_bare_integer(self):
        result = parse_description("300")
        assert result == make(300, "circle")
        assert result.length_ms == 300
        assert result.easing_name == "circle"
        assert result.easing == NamedEasing("circle")

    def test_bare_integer_with_whitespace(self):
        assert parse_description(" 120 ").length_ms == 120


class TestParseUnits:
    def test_seconds(self):
        result = parse_description("1s linear")
        assert result.length_ms == 1000
        assert result.easing_name == "linear"
        assert result.easing == NamedEasing("linear")

    def test_milliseconds_attached(self):
        result = parse_description("300ms sigmoid")
        assert (result.length_ms, result.easing_name) == (300, "sigmoid")

    def test_unit_separated_by_space(self):
        result = parse_description("300 ms easeOutElastic")
        assert (result.length_ms, result.easing_name) == (300, "easeOutElastic")

    def test_fractional_seconds(self):
        assert parse_description("1.5s").length_ms == 1500

    def test_fractional_milliseconds_truncate(self):
        assert parse_description("99.9ms linear").length_ms == 99

    def test_easing_defaults_to_circle(self):
        result = parse_description("250ms")
        assert result.easing_name == "circle"
        assert result.easing == NamedEasing("circle")

    @pytest.mark.parametrize(
        "text",
        ["250", "250ms", "250 ms", "0.25s", "250ms circle"],
    )
    def test_equivalent_forms(self, text):
        assert parse_description(text) == make(250, "circle")


class TestParseFailures:
    @pytest.mark.parametrize(
        "text",
        [
            "bogus",
            "",
            "   ",
            "ms",
            "250ms madeup",
            "250ms linear extra",
            "250 minutes linear",
            "250m linear",
            "250msx",
            "-5ms linear",
            "-5",
            "1e400ms",
            "250ms cubic-bezier 0.1 0.2 0.3 0.4 0.5",
            "250ms cubic-bezier 0.1 nope",
        ],
    )
    def test_rejected(self, text):
        assert parse_description(text) is None


class TestParseCubicBezier:
    def test_four_points(self):
        result = parse_description("250ms cubic-bezier 0.25 0.1 0.25 1")
        assert result.length_ms == 250
        assert result.easing_name == "cubic-bezier 0.25 0.1 0.25 1.0"
        assert result.easing == CubicBezier(0.25, 0.1, 0.25, 1.0)

    def test_missing_points_use_defaults(self):
        """Absent control points are filled positionally from 0 0 1 1."""
        result = parse_description("250ms cubic-bezier 0.5")
        assert result.easing == CubicBezier(0.5, 0.0, 1.0, 1.0)
        assert result.easing_name == "cubic-bezier 0.5 0.0 1.0 1.0"

    def test_no_points_is_linear_diagonal(self):
        result = parse_description("1s cubic-bezier")
        assert result.easing == CubicBezier(0.0, 0.0, 1.0, 1.0)
        assert result.easing(0.5) == pytest.approx(0.5)

    def test_easing_is_usable(self):
        result = parse_description("250ms cubic-bezier 0.42 0 0.58 1")
        assert result.easing(0.0) == 0.0
        assert result.easing(1.0) == 1.0


class TestSerialize:
    def test_seconds_normalized_to_milliseconds(self):
        """Serialization is not byte-identical to a seconds-unit input."""
        assert description_to_string(parse_description("1s linear")) == "1000ms linear"

    def test_legacy_form_gains_unit_and_easing(self):
        assert description_to_string(parse_description("300")) == "300ms circle"

    def test_str(self):
        assert str(make(42, "sigmoid")) == "42ms sigmoid"

    def test_cubic_bezier(self):
        desc = parse_description("0.25s cubic-bezier 0.25 0.1 0.25 1")
        assert description_to_string(desc) == "250ms cubic-bezier 0.25 0.1 0.25 1.0"

    @pytest.mark.parametrize(
        "text", ["2s sigmoid", "300", "250ms cubic-bezier 0.1 0.7 1 0.1"]
    )
    def test_encode_decode_encode_stable(self, text):
        encoded = description_to_string(parse_description(text))
        again = description_to_string(parse_description(encoded))
        assert again == encoded


class TestEquality:
    def test_same_name_and_length(self):
        """Other fields do not take part in equality."""
        assert make(300, "circle", linear) == make(300, "circle", NamedEasing("circle"))

    def test_different_length(self):
        assert make(300, "circle") != make(301, "circle")

    def test_different_named_easing(self):
        assert make(300, "circle") != make(300, "linear")

    def test_bezier_numbers_compared_not_text(self):
        a = parse_description("100ms cubic-bezier 0.25 0.1 0.25 1")
        b = make(100, "cubic-bezier 0.250 0.10 0.25 1")
        assert a == b

    def test_bezier_control_point_differs(self):
        a = parse_description("100ms cubic-bezier 0.25 0.1 0.25 1")
        b = parse_description("100ms cubic-bezier 0.3 0.1 0.25 1")
        assert a != b

    def test_bezier_length_differs(self):
        a = parse_description("100ms cubic-bezier 0.25 0.1 0.25 1")
        b = parse_description("200ms cubic-bezier 0.25 0.1 0.25 1")
        assert a != b

    def test_bezier_y2_ignored(self):
        """y2 is compared against itself, so descriptions differing only in y2 are equal."""
        a = parse_description("100ms cubic-bezier 0.25 0.1 0.25 1")
        b = parse_description("100ms cubic-bezier 0.25 0.1 0.25 0.5")
        assert a == b

    def test_bezier_vs_named(self):
        a = parse_description("100ms cubic-bezier 0 0 1 1")
        assert a != parse_description("100ms linear")

    def test_not_equal_to_other_types(self):
        assert make(300, "circle") != "300ms circle"

    def test_hash_consistent_with_equality(self):
        a = parse_description("100ms cubic-bezier 0.25 0.1 0.25 1")
        b = make(100, "cubic-bezier 0.250 0.10 0.25 1")
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

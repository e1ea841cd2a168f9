"""Tests for live configuration options."""

import logging

import pytest
from tick_animation import DescriptionOption, IntOption, parse_description
from tick_animation.options import Option, parse_int


class TestParseInt:
    @pytest.mark.parametrize("text,expected", [("5", 5), (" 42 ", 42), ("-3", -3), ("+7", 7)])
    def test_valid(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "12ms"])
    def test_invalid(self, text):
        assert parse_int(text) is None


class TestIntOption:
    def test_default(self):
        option = IntOption("duration", 300)
        assert option.name == "duration"
        assert option.get_value() == 300
        assert option.default_value == 300

    def test_set_value(self):
        option = IntOption("duration", 300)
        option.set_value(150)
        assert option.get_value() == 150

    def test_set_value_str(self):
        option = IntOption("duration", 300)
        assert option.set_value_str("450") is True
        assert option.get_value() == 450

    def test_invalid_string_keeps_value_and_warns(self, caplog):
        option = IntOption("duration", 300)
        with caplog.at_level(logging.WARNING, logger="tick_animation.options"):
            assert option.set_value_str("fast") is False
        assert option.get_value() == 300
        assert "duration" in caplog.text

    def test_reset_to_default(self):
        option = IntOption("duration", 300)
        option.set_value(1)
        option.reset_to_default()
        assert option.get_value() == 300


class TestDescriptionOption:
    def test_string_default(self):
        option = DescriptionOption("open_animation", "200ms sigmoid")
        assert option.get_value() == parse_description("200ms sigmoid")

    def test_description_default(self):
        desc = parse_description("1s linear")
        option = DescriptionOption("open_animation", desc)
        assert option.get_value() is desc

    def test_invalid_default_raises(self):
        with pytest.raises(ValueError):
            DescriptionOption("open_animation", "slowly")

    def test_set_value_str(self):
        option = DescriptionOption("open_animation", "200ms sigmoid")
        assert option.set_value_str("0.5s circle") is True
        assert option.get_value().length_ms == 500

    def test_invalid_string_rejected(self):
        option = DescriptionOption("open_animation", "200ms sigmoid")
        assert option.set_value_str("200ms wobble") is False
        assert option.get_value().easing_name == "sigmoid"


class TestOption:
    def test_custom_parser(self):
        option = Option("scale", 1.0, lambda text: float(text) if text else None)
        assert option.set_value_str("2.5") is True
        assert option.get_value() == 2.5

    def test_repr(self):
        assert repr(IntOption("duration", 3)) == "IntOption('duration', 3)"

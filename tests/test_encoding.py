import json
import math

import pytest

from jsonmodel.encoding import Flag, JsonType, escape_string, format_double, indent


@pytest.mark.parametrize(
    "raw, escaped",
    [
        ("\n", "\\n"),
        ("\t", "\\t"),
        ("\r", "\\r"),
        ("\b", "\\b"),
        ("\f", "\\f"),
        ('"', '\\"'),
        ("\\", "\\\\"),
        ("/", "\\/"),
    ],
)
def test_escape_special_characters(raw, escaped):
    assert escape_string(raw) == escaped


def test_escape_control_character_uses_lowercase_hex():
    assert escape_string("\x1b") == "\\u001b"


def test_escape_leaves_plain_text_alone():
    text = "hello world é"
    assert escape_string(text) == text


@pytest.mark.parametrize(
    "text",
    ["", "a/b", 'quote "x"', "tab\tnew\nline", "".join(chr(c) for c in range(0x20)), "ünï"],
)
def test_escape_round_trips_through_json(text):
    assert json.loads('"' + escape_string(text) + '"') == text


def test_escape_output_has_no_raw_control_characters():
    out = escape_string("".join(chr(c) for c in range(0x40)))
    assert all(ord(ch) >= 0x20 for ch in out)


def test_format_non_finite_values():
    assert format_double(float("nan")) == "NaN"
    assert format_double(float("inf")) == "Infinity"
    assert format_double(float("-inf")) == "-Infinity"


@pytest.mark.parametrize("value", [0.0, 1.0, -2.5, 0.1, 123456.789, 1e-300, 1.7976931348623157e308])
def test_format_double_round_trips(value):
    assert float(format_double(value, Flag.PLAIN)) == value


def test_format_double_whole_number_has_no_point():
    assert format_double(3.0) == "3"


def test_nozero_keeps_value_and_drops_nothing_significant():
    for value in (0.5, 0.1, -12.25):
        plain = format_double(value, Flag.PLAIN)
        nozero = format_double(value, Flag.NOZERO)
        assert float(nozero) == value
        assert not nozero.endswith("0") or nozero.endswith(".0")
        assert nozero == plain


def test_nozero_non_finite_unchanged():
    assert format_double(float("nan"), Flag.NOZERO) == "NaN"


@pytest.mark.parametrize("level", [0, 1, 3, 7])
def test_indent_pretty(level):
    out = indent(level, Flag.PRETTY)
    assert len(out) == level * 2
    assert set(out) <= {" "}


@pytest.mark.parametrize("flags", [Flag.PLAIN, Flag.SPACED, Flag.NOZERO])
def test_indent_without_pretty_is_empty(flags):
    assert indent(5, flags) == ""


def test_indent_with_combined_flags():
    assert indent(2, Flag.PRETTY | Flag.SPACED) == indent(2, Flag.PRETTY)
    assert len(indent(2, Flag.PRETTY | Flag.SPACED)) == 4


def test_json_type_name():
    assert JsonType.STRING.type_name == "string"
    assert JsonType(JsonType.ARRAY.value) is JsonType.ARRAY
    assert math.isfinite(float(format_double(float(JsonType.INT))))
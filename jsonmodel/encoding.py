"""Type tags, serialisation flags and low-level text encoding helpers."""

from __future__ import annotations

import enum
import math

__all__ = ["JsonType", "Flag", "escape_string", "format_double", "indent"]

HEX_CHARS = "0123456789abcdefABCDEF"
NUMBER_CHARS = "0123456789.+-eE"


class JsonType(enum.IntEnum):
    """The kinds of value a JSON document can hold."""

    NULL = 0
    BOOLEAN = 1
    DOUBLE = 2
    INT = 3
    OBJECT = 4
    ARRAY = 5
    STRING = 6

    @property
    def type_name(self) -> str:
        """Lower-case name suitable for messages and logs."""
        return self.name.lower()


class Flag(enum.IntFlag):
    """Formatting options for serialisation."""

    PLAIN = 0
    SPACED = 1 << 0
    PRETTY = 1 << 1
    NOZERO = 1 << 2


def _build_escape_table() -> dict[int, str]:
    table = {
        code: "\\u00" + HEX_CHARS[code >> 4] + HEX_CHARS[code & 0xF]
        for code in range(0x20)
    }
    table.update(
        {
            ord("\b"): "\\b",
            ord("\n"): "\\n",
            ord("\r"): "\\r",
            ord("\t"): "\\t",
            ord("\f"): "\\f",
            ord('"'): '\\"',
            ord("\\"): "\\\\",
            ord("/"): "\\/",
        }
    )
    return table


_ESCAPES = _build_escape_table()


def escape_string(text: str) -> str:
    """Escape ``text`` for use inside a JSON string literal (without quotes)."""
    return text.translate(_ESCAPES)


def format_double(value: float, flags: int = Flag.PLAIN) -> str:
    """Render a floating point number as JSON text.

    NaN and infinities are written as ``NaN``, ``Infinity`` and
    ``-Infinity``.  Other values use 17 significant digits.  With
    ``Flag.NOZERO`` trailing zeroes after the decimal point are dropped,
    keeping at least one digit after it.
    """
    if math.isnan(value):
        text = "NaN"
    elif math.isinf(value):
        text = "Infinity" if value > 0 else "-Infinity"
    else:
        text = "%.17g" % value

    text = text.replace(",", ".", 1)
    dot = text.find(".")
    if dot >= 0 and flags & Flag.NOZERO:
        last = dot + 1
        for pos in range(dot + 1, len(text)):
            if text[pos] != "0":
                last = pos
        text = text[: last + 1]
    return text


def indent(level: int, flags: int) -> str:
    """Return the indentation for ``level`` when pretty printing, else ``''``."""
    if flags & Flag.PRETTY:
        return " " * (level * 2)
    return ""
"""JSON value model: construction, type coercion and serialisation."""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Iterator, Optional

from jsonmodel.encoding import Flag, JsonType, escape_string, format_double, indent

__all__ = ["JsonValue", "get_type", "is_type", "to_json_string"]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Serializer = Callable[["JsonValue", int, int], str]

_C_SPACE = " \t\n\v\f\r"
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_TEXT = re.compile(
    r"[ \t\n\v\f\r]*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a two's complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _truncate(value: float, low: int, high: int) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return high if value > 0 else low
    return _clamp(int(value), low, high)


def _parse_int64(text: str) -> Optional[int]:
    """Parse a leading decimal integer, saturating at the 64-bit limits."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return _clamp(int(match.group(1)), INT64_MIN, INT64_MAX)


def _parse_double(text: str) -> float:
    """Parse the whole of ``text`` as a number; anything else gives 0.0."""
    if _FLOAT_TEXT.fullmatch(text) is None:
        return 0.0
    result = float(text.lstrip(_C_SPACE))
    if math.isinf(result) and "inf" not in text.lower():
        # Out of range for a double.
        return 0.0
    return result


def _userdata_serializer(value: "JsonValue", level: int, flags: int) -> str:
    return str(value.userdata)


class JsonValue:
    """A single JSON value of any type except null (null is ``None``)."""

    __slots__ = ("type", "value", "userdata", "_serializer")

    def __init__(self, type: JsonType, value: Any = None) -> None:
        self.type = JsonType(type)
        if value is None and self.type is JsonType.OBJECT:
            value = {}
        elif value is None and self.type is JsonType.ARRAY:
            value = []
        self.value = value
        self.userdata: Any = None
        self._serializer: Optional[Serializer] = None

    def __repr__(self) -> str:
        return f"JsonValue({self.type.name}, {self.value!r})"

    # construction

    @classmethod
    def new_object(cls) -> "JsonValue":
        return cls(JsonType.OBJECT, {})

    @classmethod
    def new_array(cls) -> "JsonValue":
        return cls(JsonType.ARRAY, [])

    @classmethod
    def new_boolean(cls, b: Any) -> "JsonValue":
        return cls(JsonType.BOOLEAN, bool(b))

    @classmethod
    def new_int(cls, i: int) -> "JsonValue":
        return cls(JsonType.INT, _wrap(int(i), 32))

    @classmethod
    def new_int64(cls, i: int) -> "JsonValue":
        return cls(JsonType.INT, _wrap(int(i), 64))

    @classmethod
    def new_double(cls, d: float) -> "JsonValue":
        return cls(JsonType.DOUBLE, float(d))

    @classmethod
    def new_double_s(cls, d: float, text: str) -> "JsonValue":
        """A double that serialises exactly as ``text``."""
        jso = cls.new_double(d)
        jso.set_serializer(_userdata_serializer, str(text))
        return jso

    @classmethod
    def new_string(cls, s: str) -> "JsonValue":
        return cls(JsonType.STRING, str(s))

    @classmethod
    def new_string_len(cls, s: str, length: int) -> "JsonValue":
        if length < 0 or length > len(s):
            raise ValueError(f"length {length} out of range for string of {len(s)}")
        return cls(JsonType.STRING, s[:length])

    # type checks

    def is_type(self, type: JsonType) -> bool:
        return self.type == type

    # serialisation

    def to_json_string(self, flags: int = Flag.SPACED) -> str:
        """Render this value as JSON text using ``flags``."""
        return self._serialize(0, int(flags))

    def set_serializer(self, func: Optional[Serializer], userdata: Any = None) -> None:
        """Use ``func(value, level, flags)`` to render this value.

        Passing ``None`` restores the default rendering and drops userdata.
        """
        self.userdata = None
        if func is None:
            self._serializer = None
            return
        self._serializer = func
        self.userdata = userdata

    def _serialize(self, level: int, flags: int) -> str:
        if self._serializer is not None:
            return self._serializer(self, level, flags)
        kind = self.type
        if kind is JsonType.BOOLEAN:
            return "true" if self.value else "false"
        if kind is JsonType.INT:
            return str(self.value)
        if kind is JsonType.DOUBLE:
            return format_double(self.value, flags)
        if kind is JsonType.STRING:
            return '"' + escape_string(self.value) + '"'
        if kind is JsonType.OBJECT:
            return self._render_container(list(self.value.items()), "{", "}", level, flags)
        if kind is JsonType.ARRAY:
            pairs = [(None, item) for item in self.value]
            return self._render_container(pairs, "[", "]", level, flags)
        return "null"

    @staticmethod
    def _render_container(pairs, opening, closing, level, flags) -> str:
        pretty = bool(flags & Flag.PRETTY)
        spaced = bool(flags & Flag.SPACED)
        parts = [opening]
        if pretty:
            parts.append("\n")
        for position, (key, item) in enumerate(pairs):
            if position:
                parts.append(",")
                if pretty:
                    parts.append("\n")
            if spaced:
                parts.append(" ")
            parts.append(indent(level + 1, flags))
            if key is not None:
                parts.append('"' + escape_string(key) + ('": ' if spaced else '":'))
            parts.append("null" if item is None else item._serialize(level + 1, flags))
        if pretty:
            if pairs:
                parts.append("\n")
            parts.append(indent(level, flags))
        parts.append(" " + closing if spaced else closing)
        return "".join(parts)

    # coercion

    def to_bool(self) -> bool:
        kind = self.type
        if kind is JsonType.BOOLEAN:
            return bool(self.value)
        if kind in (JsonType.INT, JsonType.DOUBLE):
            return self.value != 0
        if kind is JsonType.STRING:
            return len(self.value) != 0
        return False

    def to_int32(self) -> int:
        kind = self.type
        if kind is JsonType.STRING:
            parsed = _parse_int64(self.value)
            return 0 if parsed is None else _clamp(parsed, INT32_MIN, INT32_MAX)
        if kind is JsonType.INT:
            return _clamp(self.value, INT32_MIN, INT32_MAX)
        if kind is JsonType.DOUBLE:
            return _truncate(self.value, INT32_MIN, INT32_MAX)
        if kind is JsonType.BOOLEAN:
            return int(self.value)
        return 0

    def to_int64(self) -> int:
        kind = self.type
        if kind is JsonType.INT:
            return self.value
        if kind is JsonType.DOUBLE:
            return _truncate(self.value, INT64_MIN, INT64_MAX)
        if kind is JsonType.BOOLEAN:
            return int(self.value)
        if kind is JsonType.STRING:
            parsed = _parse_int64(self.value)
            return 0 if parsed is None else parsed
        return 0

    def to_float(self) -> float:
        kind = self.type
        if kind is JsonType.DOUBLE:
            return self.value
        if kind is JsonType.INT:
            return float(self.value)
        if kind is JsonType.BOOLEAN:
            return float(self.value)
        if kind is JsonType.STRING:
            return _parse_double(self.value)
        return 0.0

    def to_str(self) -> str:
        """The string itself, or the spaced JSON text of any other value."""
        if self.type is JsonType.STRING:
            return self.value
        return self.to_json_string(Flag.SPACED)

    def string_length(self) -> int:
        return len(self.value) if self.type is JsonType.STRING else 0

    # objects

    def _require(self, kind: JsonType) -> None:
        if self.type is not kind:
            raise TypeError(f"expected {kind.type_name}, got {self.type.type_name}")

    def object_add(self, key: str, val: Optional["JsonValue"]) -> None:
        """Set ``key``; replacing a value keeps the key's position."""
        self._require(JsonType.OBJECT)
        self.value[key] = val

    def object_get(self, key: str) -> Optional["JsonValue"]:
        if self.type is not JsonType.OBJECT:
            return None
        return self.value.get(key)

    def object_has(self, key: str) -> bool:
        return self.type is JsonType.OBJECT and key in self.value

    def object_del(self, key: str) -> None:
        self._require(JsonType.OBJECT)
        self.value.pop(key, None)

    def object_length(self) -> int:
        self._require(JsonType.OBJECT)
        return len(self.value)

    def object_items(self) -> Iterator[tuple[str, Optional["JsonValue"]]]:
        """Iterate over a snapshot of the pairs; the object may be changed meanwhile."""
        self._require(JsonType.OBJECT)
        return iter(list(self.value.items()))

    # arrays

    def array_length(self) -> int:
        self._require(JsonType.ARRAY)
        return len(self.value)

    def array_add(self, val: Optional["JsonValue"]) -> None:
        self._require(JsonType.ARRAY)
        self.value.append(val)

    def array_put_idx(self, idx: int, val: Optional["JsonValue"]) -> None:
        """Set element ``idx``, padding the array with nulls if needed."""
        self._require(JsonType.ARRAY)
        if idx < 0:
            raise IndexError(f"negative array index {idx}")
        items = self.value
        if idx >= len(items):
            items.extend([None] * (idx + 1 - len(items)))
        items[idx] = val

    def array_get_idx(self, idx: int) -> Optional["JsonValue"]:
        self._require(JsonType.ARRAY)
        if 0 <= idx < len(self.value):
            return self.value[idx]
        return None

    def array_sort(self, key: Callable[[Optional["JsonValue"]], Any]) -> None:
        self._require(JsonType.ARRAY)
        self.value.sort(key=key)


def get_type(obj: Optional[JsonValue]) -> JsonType:
    """Type of ``obj``; ``None`` stands for null."""
    return JsonType.NULL if obj is None else obj.type


def is_type(obj: Optional[JsonValue], type: JsonType) -> bool:
    return get_type(obj) == type


def to_json_string(obj: Optional[JsonValue], flags: int = Flag.SPACED) -> str:
    return "null" if obj is None else obj.to_json_string(flags)
# jsonmodel

`jsonmodel` is a small in-memory JSON document model. Every value has a type from
`jsonmodel.encoding.JsonType`: `NULL`, `BOOLEAN`, `DOUBLE`, `INT`, `OBJECT`, `ARRAY` or
`STRING`. A value is a `jsonmodel.value.JsonValue`, and JSON null is written as Python `None`.
Values can be read as other types. Objects keep their keys in insertion order. Flags choose
the layout of the text output.

## Installation

```
pip install jsonmodel
```

## Building values and writing JSON text

```python
from jsonmodel.value import JsonValue, to_json_string, get_type
from jsonmodel.encoding import Flag

doc = JsonValue.new_object()
doc.object_add("name", JsonValue.new_string("sensor"))
doc.object_add("count", JsonValue.new_int(3))
doc.object_add("ratio", JsonValue.new_double(0.5))

items = JsonValue.new_array()
items.array_add(JsonValue.new_boolean(True))
items.array_add(None)                      # JSON null
doc.object_add("items", items)

print(doc.to_json_string(Flag.PLAIN))
# {"name":"sensor","count":3,"ratio":0.5,"items":[true,null]}
print(doc.to_json_string(Flag.SPACED | Flag.PRETTY))
print(to_json_string(None))                # null
print(get_type(None))                      # JsonType.NULL
```

### Constructors

- `new_object()` and `new_array()` create empty containers.
- `new_boolean(b)` creates a boolean.
- `new_int(i)` creates an int, with `i` wrapped to 32 bits. `new_int64(i)` wraps it to 64 bits.
- `new_double(d)` creates a double.
- `new_double_s(d, text)` creates a double that is always written out as `text`.
- `new_string(s)` creates a string. `new_string_len(s, length)` keeps only the first `length`
  characters of `s`, and raises `ValueError` if `length` is negative or longer than `s`.

### Serialisation flags

`to_json_string(flags)` defaults to `Flag.SPACED`. The flags combine with `|`:

- `Flag.PLAIN`: no extra whitespace.
- `Flag.SPACED`: a space after each opening bracket, after each `":"` and before each closing
  bracket.
- `Flag.PRETTY`: one member per line, indented two spaces per level.
- `Flag.NOZERO`: drops trailing zeros after the decimal point of a double, keeping one digit.

Doubles are written with 17 significant digits. NaN and the infinities come out as `NaN`,
`Infinity` and `-Infinity`. Strings are escaped the same way under every flag:

- `"`, `\` and `/` are escaped with a backslash.
- Backspace, form feed, newline, carriage return and tab use their short escapes.
- Every other control character below `0x20` becomes `\u00XX`.

The helpers `escape_string`, `format_double` and `indent` in `jsonmodel.encoding` are
available on their own.

`set_serializer(func, userdata)` makes a value render through `func(value, level, flags)`,
which returns a string. `userdata` is stored on `value.userdata`. Passing `None` as `func`
restores the default rendering and clears the userdata.

## Reading values as other types

- `to_bool()`:
  - numbers are true unless zero;
  - strings are true unless empty;
  - objects and arrays are false.
- `to_int32()`: clamps to the 32-bit range.
  - Doubles are truncated toward zero.
  - Strings are read from their leading decimal integer.
- `to_int64()`: the same rules, clamped to the 64-bit range.
- `to_float()`: a string is parsed only if the whole string is a number. Otherwise the result
  is `0.0`, and so is an out-of-range number.
- `to_str()`: the text of a string value, or the spaced JSON text of any other value.
- `string_length()`: the length of a string value, and `0` for any other value.

A value that cannot be converted reads as `0`, `0.0` or `False`.

## Objects and arrays

Objects:

- `object_add` inserts a key, or replaces its value in place.
- `object_get` returns the value, or `None` if the key is missing or the value is not an
  object.
- `object_has`, `object_del` and `object_length` test, delete and count keys.
- `object_items()` iterates over a snapshot of the pairs.

Arrays:

- `array_add` appends an element.
- `array_put_idx(idx, val)` sets element `idx`, padding the array with nulls as needed. It
  raises `IndexError` for a negative index.
- `array_get_idx` returns `None` for an index out of range.
- `array_length` counts the elements.
- `array_sort(key)` sorts the elements with `key`.

Calling an object or array method on a value of the wrong type raises `TypeError`. The
exceptions are `object_get` and `object_has`.

## Iterating over objects

```python
from jsonmodel.iterator import ObjectIterator, iter_pairs

for name, value in iter_pairs(doc):
    print(name, value)

it, end = ObjectIterator.begin(doc), ObjectIterator.end(doc)
while it != end:
    print(it.peek_name(), it.peek_value())
    it.advance()
```

`begin` and `end` raise `TypeError` for anything that is not an object. `peek_name`,
`peek_value` and `advance` raise `IndexError` at the end position.
`ObjectIterator.default()` refers to no pair.

While iterating you may replace values or delete pairs; deleted pairs are skipped. Keys added
during iteration are not visited.

## What this package does not do

It only builds values and writes them out. It has no parser for JSON text, no file reading or
writing, and no command-line tool.
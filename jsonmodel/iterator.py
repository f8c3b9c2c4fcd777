"""Forward iteration over the name/value pairs of a JSON object."""

from __future__ import annotations

from typing import Iterator, Optional

from jsonmodel.encoding import JsonType
from jsonmodel.value import JsonValue

__all__ = ["ObjectIterator", "iter_pairs"]


def _require_object(obj: Optional[JsonValue]) -> JsonValue:
    if obj is None or obj.type is not JsonType.OBJECT:
        kind = "null" if obj is None else obj.type.type_name
        raise TypeError(f"expected an object, got {kind}")
    return obj


class ObjectIterator:
    """A position within an object's pairs, or the end position.

    Replacing the value of a pair while iterating is allowed, and so is
    deleting pairs; pairs deleted before they are reached are skipped.
    Adding pairs while iterating is not supported: new keys are not visited.
    """

    __slots__ = ("_owner", "_keys", "_pos")

    def __init__(
        self,
        owner: Optional[JsonValue] = None,
        keys: tuple[str, ...] = (),
        pos: int = 0,
    ) -> None:
        self._owner = owner
        self._keys = keys
        self._pos = pos

    def __repr__(self) -> str:
        if self.at_end:
            return "ObjectIterator(<end>)"
        return f"ObjectIterator({self._keys[self._pos]!r})"

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._keys)

    @classmethod
    def default(cls) -> "ObjectIterator":
        """An iterator that refers to no pair; it must not be peeked or advanced."""
        return cls()

    @classmethod
    def begin(cls, obj: Optional[JsonValue]) -> "ObjectIterator":
        """An iterator at the first pair of ``obj``, or at the end if it has none."""
        obj = _require_object(obj)
        iterator = cls(obj, tuple(obj.value), 0)
        iterator._skip_missing()
        return iterator

    @classmethod
    def end(cls, obj: Optional[JsonValue]) -> "ObjectIterator":
        """The position past the last pair of ``obj``."""
        obj = _require_object(obj)
        return cls(obj, (), 0)

    def _skip_missing(self) -> None:
        contents = self._owner.value if self._owner is not None else {}
        while not self.at_end and self._keys[self._pos] not in contents:
            self._pos += 1

    def _check_valid(self) -> None:
        if self.at_end:
            raise IndexError("iterator is at the end of the object")

    def advance(self) -> None:
        """Move to the next pair, or to the end."""
        self._check_valid()
        self._pos += 1
        self._skip_missing()

    def peek_name(self) -> str:
        """The name of the pair at this position."""
        self._check_valid()
        return self._keys[self._pos]

    def peek_value(self) -> Optional[JsonValue]:
        """The value of the pair at this position; ``None`` stands for null."""
        self._check_valid()
        return self._owner.object_get(self._keys[self._pos])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectIterator):
            return NotImplemented
        if self.at_end or other.at_end:
            return self.at_end and other.at_end
        return (
            self._owner is other._owner
            and self._keys[self._pos] == other._keys[other._pos]
        )

    __hash__ = None  # type: ignore[assignment]


def iter_pairs(obj: Optional[JsonValue]) -> Iterator[tuple[str, Optional[JsonValue]]]:
    """Yield the ``(name, value)`` pairs of ``obj`` in insertion order."""
    it = ObjectIterator.begin(obj)
    stop = ObjectIterator.end(obj)
    while it != stop:
        yield it.peek_name(), it.peek_value()
        it.advance()
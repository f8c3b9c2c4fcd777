import pytest

from jsonmodel.iterator import ObjectIterator, iter_pairs
from jsonmodel.value import JsonValue


def _sample():
    obj = JsonValue.new_object()
    obj.object_add("first", JsonValue.new_string("george"))
    obj.object_add("age", JsonValue.new_int(100))
    obj.object_add("nothing", None)
    return obj


def test_empty_object_begin_equals_end():
    obj = JsonValue.new_object()
    assert ObjectIterator.begin(obj) == ObjectIterator.end(obj)


def test_walk_in_insertion_order():
    obj = _sample()
    it = ObjectIterator.begin(obj)
    end = ObjectIterator.end(obj)
    names = []
    while it != end:
        names.append(it.peek_name())
        it.advance()
    assert names == ["first", "age", "nothing"]


def test_peek_value_returns_stored_values():
    obj = _sample()
    it = ObjectIterator.begin(obj)
    assert it.peek_value() is obj.object_get("first")
    assert it.peek_value().to_str() == "george"
    it.advance()
    assert it.peek_value().to_int64() == 100
    it.advance()
    assert it.peek_value() is None


def test_advance_past_end_raises():
    obj = JsonValue.new_object()
    obj.object_add("a", JsonValue.new_int(1))
    it = ObjectIterator.begin(obj)
    it.advance()
    assert it == ObjectIterator.end(obj)
    with pytest.raises(IndexError):
        it.advance()


def test_peek_at_end_raises():
    obj = JsonValue.new_object()
    end = ObjectIterator.end(obj)
    with pytest.raises(IndexError):
        end.peek_name()
    with pytest.raises(IndexError):
        end.peek_value()


def test_begin_on_non_object_raises():
    with pytest.raises(TypeError):
        ObjectIterator.begin(JsonValue.new_array())
    with pytest.raises(TypeError):
        ObjectIterator.begin(None)


def test_end_on_non_object_raises():
    with pytest.raises(TypeError):
        ObjectIterator.end(JsonValue.new_string("x"))
    with pytest.raises(TypeError):
        ObjectIterator.end(None)


def test_default_iterator_cannot_be_used():
    it = ObjectIterator.default()
    with pytest.raises(IndexError):
        it.peek_name()
    with pytest.raises(IndexError):
        it.advance()


def test_iterators_at_same_pair_are_equal():
    obj = _sample()
    a = ObjectIterator.begin(obj)
    b = ObjectIterator.begin(obj)
    assert a == b
    b.advance()
    assert a != b
    a.advance()
    assert a == b


def test_iterators_of_different_objects_differ():
    a = ObjectIterator.begin(_sample())
    b = ObjectIterator.begin(_sample())
    assert a != b


def test_replace_value_during_iteration():
    obj = _sample()
    it = ObjectIterator.begin(obj)
    replacement = JsonValue.new_boolean(True)
    obj.object_add(it.peek_name(), replacement)
    assert it.peek_value() is replacement
    it.advance()
    assert it.peek_name() == "age"


def test_deleted_pairs_are_skipped():
    obj = _sample()
    it = ObjectIterator.begin(obj)
    obj.object_del("age")
    it.advance()
    assert it.peek_name() == "nothing"
    it.advance()
    assert it == ObjectIterator.end(obj)


def test_iter_pairs_matches_object_items():
    obj = _sample()
    assert list(iter_pairs(obj)) == list(obj.object_items())


def test_iter_pairs_empty_and_invalid():
    assert list(iter_pairs(JsonValue.new_object())) == []
    with pytest.raises(TypeError):
        list(iter_pairs(JsonValue.new_int(3)))


def test_comparison_with_other_types():
    it = ObjectIterator.begin(_sample())
    assert (it == "first") is False
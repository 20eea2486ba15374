"""Test value normalization.

Covers: kinds, tags, integer conversion, lengths and value lists.
"""

import functools

import pytest

from conftest import Empty, Functor, Point, Printable, Sized, Tagged
from typecheck import ValueList, pack, unpack
from typecheck.core.normalize import (
    getmetamethod, is_empty, iscallable, length, math_type, positional, rawlen, tagof, tointeger, typeof,
)


@pytest.mark.unit
class TestTypeof:
    """Test fundamental kinds."""

    @pytest.mark.parametrize("value,kind", [
        (None, "nil"),
        (True, "boolean"),
        (False, "boolean"),
        (1, "number"),
        (1.5, "number"),
        ("abc", "string"),
        (b"abc", "string"),
        (bytearray(b"abc"), "string"),
        (len, "function"),
        (lambda: None, "function"),
        (functools.partial(max, 1), "function"),
        ({}, "table"),
        ([], "table"),
        ((1, 2), "table"),
        (Point(), "table"),
        (Functor(), "table"),
    ])
    def test_kinds(self, value, kind):
        """Test the kind of common values."""
        assert typeof(value) == kind

    def test_file_is_userdata(self, open_file, closed_file):
        """Test file handles are userdata whether open or not."""
        assert typeof(open_file) == "userdata"
        assert typeof(closed_file) == "userdata"


@pytest.mark.unit
class TestTagof:
    """Test diagnostic type names."""

    def test_numbers(self):
        """Test integers and floats are told apart."""
        assert tagof(1) == "integer"
        assert tagof(1.0) == "float"
        assert tagof(True) == "boolean"

    def test_class_name(self):
        """Test instances of user classes are tagged by class name."""
        assert tagof(Point()) == "Point"

    def test_type_attribute_wins(self):
        """Test an explicit _type attribute overrides the class name."""
        assert tagof(Tagged()) == "Object"

    def test_builtin_containers(self):
        """Test builtin containers are plain tables."""
        assert tagof({}) == "table"
        assert tagof([1]) == "table"

    def test_files(self, open_file, closed_file):
        """Test open and closed files."""
        assert tagof(open_file) == "file"
        assert tagof(closed_file) == "closed file"

    def test_fallback(self):
        assert tagof(None) == "nil"
        assert tagof("x") == "string"


@pytest.mark.unit
class TestIntegers:
    """Test integer conversion."""

    def test_tointeger(self):
        """Test integral numbers convert and others don't."""
        assert tointeger(3) == 3
        assert tointeger(3.0) == 3
        assert tointeger(3.5) is None
        assert tointeger("3") is None
        assert tointeger(True) is None
        assert tointeger(float("inf")) is None
        assert tointeger(float("nan")) is None

    def test_math_type(self):
        assert math_type(2) == "integer"
        assert math_type(2.0) == "float"
        assert math_type("2") is None


@pytest.mark.unit
class TestTables:
    """Test table helpers."""

    def test_is_empty(self):
        """Test emptiness of containers and plain objects."""
        assert is_empty({})
        assert is_empty([])
        assert is_empty(Empty())
        assert not is_empty(Point())
        assert not is_empty({"a": 1})

    def test_iscallable(self):
        """Test functions and callable objects."""
        assert iscallable(len)
        assert iscallable(Functor())
        assert not iscallable(Point())
        assert not iscallable("len")

    def test_getmetamethod_ignores_builtins(self):
        """Test special methods inherited from builtins are not reported."""
        assert getmetamethod([], "__len__") is None
        assert getmetamethod(Sized(), "__len__")() == 42

    def test_length_priority(self):
        """Test __len__ beats __str__ which beats the raw length."""
        assert length(Sized()) == 42
        assert length(Printable()) == 3
        assert length([1, 2, 3]) == 3

    def test_rawlen_counts_contiguous_keys(self):
        """Test rawlen stops at the first missing integer key."""
        assert rawlen({1: "a", 2: "b", 4: "c"}) == 2
        assert rawlen({"a": 1}) == 0
        assert rawlen(Sized()) == 0


@pytest.mark.unit
class TestValueList:
    """Test value lists with explicit counts."""

    def test_pack_keeps_trailing_none(self):
        """Test trailing None values are counted."""
        values = pack(1, None, None)
        assert values.n == 3
        assert len(values) == 3

    def test_get_is_one_based(self):
        values = pack("a", "b")
        assert values.get(1) == "a"
        assert values.get(2) == "b"
        assert values.get(3) is None
        assert values.get(0) is None

    def test_rest(self):
        """Test rest drops the first value."""
        assert pack("self", 1).rest() == pack(1)
        assert pack().rest().n == 0

    def test_equality(self):
        assert pack(1, 2) == ValueList([1, 2])
        assert pack(1) != pack(1, None)


@pytest.mark.unit
class TestUnpack:
    """Test unpacking ranges of values."""

    def test_whole_sequence(self):
        assert unpack([1, 2, 3]) == (1, 2, 3)

    def test_start(self):
        assert unpack([1, 2, 3], 2) == (2, 3)

    def test_past_end_pads_none(self):
        """Test positions past the end produce None."""
        assert unpack([1, 2], 1, 4) == (1, 2, None, None)

    def test_value_list_uses_count(self):
        """Test a value list unpacks up to its count."""
        assert unpack(pack(1, None, None)) == (1, None, None)

    def test_mapping(self):
        assert unpack({1: "a", 2: "b"}) == ("a", "b")


@pytest.mark.unit
class TestPositional:
    """Test mapping keyword arguments to positions."""

    def test_positional_call_unchanged(self):
        def f(a, b=1):
            return a

        assert positional(f)((1, 2), {}) == (1, 2)

    def test_keywords_in_order(self):
        def f(a, b=1):
            return a

        assert positional(f)((), {"b": 2, "a": 1}) == (1, 2)

    def test_skipped_parameters_get_defaults(self):
        """Test a later keyword keeps its position behind filled defaults."""
        def f(a, b=1, c="s"):
            return a

        assert positional(f)((1,), {"c": 5}) == (1, 1, 5)

    def test_trailing_defaults_not_filled(self):
        def f(a, b=1, c="s"):
            return a

        assert positional(f)((), {"a": 1}) == (1,)

    def test_var_positional_and_keyword_only(self):
        """Test keyword-only parameters are not positions."""
        def f(a, *rest, key=None):
            return a

        assert positional(f)((1, 2, 3), {"key": 4}) == (1, 2, 3)

    def test_invalid_call_left_alone(self):
        def f(a, b):
            return a

        assert positional(f)((), {"b": 2}) == ()

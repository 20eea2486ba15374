"""Test typespec splitting and classification of single type names."""

import pytest

from conftest import Empty, Functor, Point, Tagged
from typecheck import classify, typesplit
from typecheck.core.typespec import accepts_nil, split_container


@pytest.mark.unit
class TestTypesplit:
    """Test splitting typespecs into type names."""

    def test_bar_separated(self):
        assert typesplit("string|number") == ["string", "number"]

    def test_or_separated(self):
        """Test 'or' is a synonym for '|'."""
        assert typesplit("int or string") == ["int", "string"]

    def test_whitespace(self):
        assert typesplit("  string | nil ") == ["string", "nil"]

    def test_question_mark_adds_nil(self):
        """Test a leading '?' is replaced by nil at the end."""
        assert typesplit("?bool|:nometa") == ["bool", ":nometa", "nil"]

    def test_duplicates_removed(self):
        assert typesplit("int or string|int") == ["int", "string"]

    def test_explicit_nil_with_question_mark(self):
        """Test nil appears once, at the end."""
        assert typesplit("nil|?int") == ["int", "nil"]
        assert typesplit("?nil") == ["nil"]

    def test_list_input(self):
        """Test an already split typespec is normalized too."""
        assert typesplit(["?string", "int"]) == ["string", "int", "nil"]

    def test_accepts_nil(self):
        assert accepts_nil("?int")
        assert accepts_nil("int|nil")
        assert not accepts_nil("int")


@pytest.mark.unit
class TestSplitContainer:
    """Test composite type names."""

    def test_plural_element(self):
        assert split_container("table of ints") == ("table", "int")

    def test_singular_element(self):
        assert split_container("list of string") == ("list", "string")

    def test_plain_name(self):
        assert split_container("table") == ("table", None)


@pytest.mark.unit
class TestClassify:
    """Test checking values against single type names."""

    def test_any(self):
        """Test any accepts everything except nil."""
        assert classify("any", 0)
        assert classify("any", False)
        assert not classify("any", None)

    def test_primitive_kinds(self):
        assert classify("string", "x")
        assert classify("number", 1.5)
        assert classify("nil", None)
        assert classify("table", {})
        assert not classify("table", "x")

    def test_boolean_aliases(self):
        assert classify("bool", True)
        assert classify("boolean", False)
        assert not classify("bool", 0)

    def test_integers(self):
        """Test int accepts integral floats and rejects fractional ones."""
        assert classify("int", 2)
        assert classify("integer", 2.0)
        assert not classify("int", 2.5)
        assert not classify("int", "2")

    def test_floats(self):
        assert classify("float", 1.0)
        assert not classify("float", 1)

    def test_functions(self):
        assert classify("func", len)
        assert classify("function", lambda: None)
        assert not classify("func", Functor())

    def test_callables(self):
        """Test callable accepts functions and callable objects."""
        assert classify("callable", len)
        assert classify("callable", Functor())
        assert classify("functable", Functor())
        assert classify("functor", Functor())
        assert not classify("functable", len)
        assert not classify("callable", Point())

    def test_files(self, open_file, closed_file):
        """Test file accepts only open files."""
        assert classify("file", open_file)
        assert not classify("file", closed_file)
        assert classify("closed file", closed_file)
        assert classify("userdata", closed_file)

    def test_non_empty_table(self):
        assert classify("#table", {"a": 1})
        assert not classify("#table", {})

    def test_lists(self):
        """Test lists need contiguous integer keys."""
        assert classify("list", [])
        assert classify("list", [1, 2])
        assert classify("list", {1: "a", 2: "b"})
        assert not classify("list", {"a": 1})
        assert not classify("list", "abc")

    def test_non_empty_list(self):
        assert classify("#list", [1])
        assert not classify("#list", [])

    def test_objects(self):
        """Test objects are tagged tables."""
        assert classify("object", Point())
        assert classify("object", Empty())
        assert not classify("object", {})

    def test_tags(self):
        assert classify("Point", Point())
        assert classify("Object", Tagged())
        assert not classify("Point", Empty())

    def test_literal_names(self):
        """Test ':name' matches an equal string."""
        assert classify(":nometa", ":nometa")
        assert not classify(":nometa", ":other")

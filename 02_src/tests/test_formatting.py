"""Tests for value-object helpers."""

from collections import UserDict
from types import SimpleNamespace

import pytest

from serverside.models.formatting import UNHASHABLE, camel_case, freeze, to_indented_string


class TestCamelCase:
    """Tests for camel_case()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("event_name", "eventName"),
            ("event_source_url", "eventSourceUrl"),
            ("fbc", "fbc"),
        ],
    )
    def test_camel_case(self, name, expected):
        """Test snake_case to camelCase conversion."""
        assert camel_case(name) == expected


class TestToIndentedString:
    """Tests for to_indented_string()."""

    def test_none(self):
        """Test that None renders as null."""
        assert to_indented_string(None) == "null"

    def test_booleans(self):
        """Test that booleans render lowercase."""
        assert to_indented_string(True) == "true"
        assert to_indented_string(False) == "false"

    def test_zero_is_not_null(self):
        """Test that falsy values are rendered, not treated as unset."""
        assert to_indented_string(0) == "0"
        assert to_indented_string("") == ""

    def test_multiline_indented(self):
        """Test that lines after the first are indented by four spaces."""
        assert to_indented_string("a\nb\nc") == "a\n    b\n    c"

    def test_list(self):
        """Test list rendering."""
        assert to_indented_string(["a", None, True]) == "[a, null, true]"


class TestFreeze:
    """Tests for freeze()."""

    def test_equal_structures_freeze_equal(self):
        """Test that equal nested structures produce equal hashable values."""
        first = freeze({"a": [1, 2], "b": {"c": {1, 2}}})
        second = freeze({"b": {"c": {2, 1}}, "a": [1, 2]})
        assert first == second
        assert hash(first) == hash(second)

    def test_hashable_passthrough(self):
        """Test that hashable values are returned unchanged."""
        assert freeze("x") == "x"
        assert freeze(None) is None

    def test_mapping_types_ignore_key_order(self):
        """Test that equal mappings of any type freeze equal regardless of key order."""
        first = UserDict(a=1, b=2)
        second = UserDict(b=2, a=1)
        assert first == second
        assert freeze(first) == freeze(second)
        assert freeze(first) == freeze({"a": 1, "b": 2})

    def test_unhashable_objects_collapse_to_marker(self):
        """Test that equal unhashable objects freeze equal even when their reprs differ."""
        first = SimpleNamespace(x=1, y=2)
        second = SimpleNamespace(y=2, x=1)
        assert first == second
        assert repr(first) != repr(second)
        assert freeze(first) == freeze(second) == UNHASHABLE

    def test_strings_not_split(self):
        """Test that strings are kept whole rather than treated as sequences."""
        assert freeze("abc") == "abc"
        assert freeze(["abc"]) == ("abc",)

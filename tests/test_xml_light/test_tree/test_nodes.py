"""Tests for the immutable node types."""

import dataclasses

import pytest

from xml_light.tree.nodes import Element, PCData, from_dict


class TestPCData:
    """Test suite for PCData."""

    def test_text_is_raw(self):
        """Test text is stored unescaped."""
        assert PCData("a < b & c").text == "a < b & c"

    def test_rejects_non_string(self):
        """Test non-string text is rejected."""
        with pytest.raises(TypeError):
            PCData(42)  # type: ignore[arg-type]

    def test_empty_text_allowed(self):
        """Test empty text is a valid node."""
        assert PCData("").text == ""


class TestElement:
    """Test suite for Element."""

    def test_sequences_become_tuples(self):
        """Test lists are stored as tuples."""
        element = Element("a", [("x", "1")], [PCData("t")])
        assert element.attributes == (("x", "1"),)
        assert element.children == (PCData("t"),)

    def test_empty_tag_rejected(self):
        """Test an empty tag name is rejected."""
        with pytest.raises(ValueError, match="Element tag cannot be empty"):
            Element("")

    def test_attribute_validation(self):
        """Test attribute pairs must be non-empty string names with string values."""
        with pytest.raises(TypeError):
            Element("a", [("x", 1)])  # type: ignore[list-item]
        with pytest.raises(ValueError):
            Element("a", [("", "v")])

    def test_child_validation(self):
        """Test children must be nodes."""
        with pytest.raises(TypeError, match="got str"):
            Element("a", [], ["text"])  # type: ignore[list-item]

    def test_duplicates_and_order_preserved(self):
        """Test attribute order and duplicates are kept."""
        element = Element("e", [("b", "2"), ("a", "1"), ("B", "3")])
        assert [name for name, _ in element.attributes] == ["b", "a", "B"]

    def test_immutable_and_hashable(self):
        """Test elements are frozen and usable as dict keys."""
        element = Element("a", [("x", "1")], [Element("b")])
        with pytest.raises(dataclasses.FrozenInstanceError):
            element.name = "c"  # type: ignore[misc]
        assert {element: 1}[Element("a", (("x", "1"),), (Element("b"),))] == 1

    def test_is_childless(self):
        """Test the self-closing predicate."""
        assert Element("a").is_childless
        assert not Element("a", [], [PCData("")]).is_childless


class TestDictConversion:
    """Test dictionary conversion."""

    def test_to_dict(self):
        """Test nested dictionary layout."""
        element = Element("a", [("x", "1")], [PCData("t"), Element("b")])
        assert element.to_dict() == {
            "tag": "a",
            "attributes": [["x", "1"]],
            "children": [{"text": "t"}, {"tag": "b", "attributes": []}],
        }

    def test_from_dict_rebuilds_tree(self):
        """Test from_dict inverts to_dict."""
        element = Element("a", [("x", "1")], [PCData("t"), Element("b", [], [PCData("u")])])
        assert from_dict(element.to_dict()) == element
        assert from_dict({"text": "only"}) == PCData("only")

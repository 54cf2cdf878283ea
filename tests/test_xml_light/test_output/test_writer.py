"""Tests for the compact and pretty renderers."""

import pytest

from xml_light.output.api import to_human_string, to_string, to_string_fmt
from xml_light.output.writer import human_label
from xml_light.shared.config import OutputFormat
from xml_light.tree.nodes import Element, PCData


@pytest.fixture
def catalog():
    """A tree exercising every pretty-printing branch."""
    return Element("root", [], [
        Element("item", [("id", "1")], [PCData("Hello")]),
        Element("empty"),
        Element("group", [], [Element("leaf", [], [PCData("x")])]),
    ])


class TestCompactWriter:
    """Test compact output."""

    def test_basic_element(self):
        """Test attributes, text and self-closing children."""
        tree = Element("a", [("x", "1")], [PCData("hi"), Element("b")])
        assert to_string(tree) == '<a x="1">hi<b/></a>'

    def test_adjacent_text_separated_by_space(self):
        """Test consecutive text nodes are joined with one space."""
        tree = Element("p", [], [PCData("one"), PCData("two"), PCData("three")])
        assert to_string(tree) == "<p>one two three</p>"

    def test_element_resets_text_separator(self):
        """Test no space is inserted around an element."""
        tree = Element("p", [], [PCData("a"), Element("br"), PCData("b")])
        assert to_string(tree) == "<p>a<br/>b</p>"

    def test_separator_reset_after_nested_text(self):
        """Test text following an element with text content gets no space."""
        tree = Element("p", [], [Element("b", [], [PCData("x")]), PCData("y")])
        assert to_string(tree) == "<p><b>x</b>y</p>"

    def test_top_level_text(self):
        """Test rendering a bare text node."""
        assert to_string(PCData("x<y")) == "x&lt;y"

    def test_attribute_order_and_duplicates(self):
        """Test attributes are written in order, duplicates included."""
        tree = Element("e", [("b", "2"), ("a", "1"), ("B", "3")])
        assert to_string(tree) == '<e b="2" a="1" B="3"/>'

    def test_attribute_escaping_gap(self):
        """Test only double quotes are escaped in attribute values."""
        tree = Element("a", [("t", 'say "hi" & <go>')])
        assert to_string(tree) == '<a t="say &quot;hi&quot; & <go>"/>'

    def test_text_escaping(self):
        """Test text escaping inside elements."""
        tree = Element("t", [], [PCData("it's <b> & \"q\" &#38;")])
        assert to_string(tree) == "<t>it&apos;s &lt;b&gt; &amp; &quot;q&quot; &#38;</t>"

    def test_no_newlines_added(self, catalog):
        """Test compact output contains no added whitespace."""
        assert "\n" not in to_string(catalog)


class TestPrettyWriter:
    """Test pretty XML output."""

    def test_layout(self, catalog):
        """Test one item per line with two-space indentation."""
        assert to_string_fmt(catalog) == (
            "<root>\n"
            '  <item id="1">Hello</item>\n'
            "  <empty/>\n"
            "  <group>\n"
            "    <leaf>x</leaf>\n"
            "  </group>\n"
            "</root>\n"
        )

    def test_childless_top_level(self):
        """Test a childless root renders self-closing on one line."""
        assert to_string_fmt(Element("e", [("k", "v")])) == '<e k="v"/>\n'

    def test_mixed_content(self):
        """Test text among elements gets its own indented line."""
        tree = Element("p", [], [PCData("a"), Element("b", [], [PCData("bold")]), PCData("c")])
        assert to_string_fmt(tree) == "<p>\n  a\n  <b>bold</b>\n  c\n</p>\n"

    def test_top_level_text(self):
        """Test a bare text node is escaped and newline terminated."""
        assert to_string_fmt(PCData("a&b")) == "a&amp;b\n"

    def test_indentation_depth(self):
        """Test depth d is indented by 2*d spaces."""
        tree = Element("d3", [], [PCData("x")])
        for name in ("d2", "d1", "d0"):
            tree = Element(name, [], [tree])
        assert to_string_fmt(tree).splitlines() == [
            "<d0>",
            "  <d1>",
            "    <d2>",
            "      <d3>x</d3>",
            "    </d2>",
            "  </d1>",
            "</d0>",
        ]

    def test_every_line_terminated(self, catalog):
        """Test output ends with a newline and has no trailing spaces."""
        output = to_string_fmt(catalog, OutputFormat.XML)
        assert output.endswith("\n")
        assert all(not line.endswith(" ") for line in output.splitlines())


class TestHumanWriter:
    """Test tag-less pretty output."""

    def test_label(self):
        """Test label derivation from tag names."""
        assert human_label("user_name") == "User name: "
        assert human_label("first_last_name") == "First last name: "
        assert human_label("Title") == "Title: "

    def test_label_non_ascii_first_letter(self):
        """Test only an ASCII first letter is upper-cased."""
        assert human_label("ßtraße") == "ßtraße: "
        assert human_label("éclair_au_chocolat") == "éclair au chocolat: "

    def test_single_text_child(self):
        """Test a text-only element renders as label and text."""
        tree = Element("user_name", [], [PCData("bob")])
        assert to_human_string(tree) == "User name: bob\n"

    def test_layout(self, catalog):
        """Test labels replace tags and empty elements vanish."""
        assert to_human_string(catalog) == (
            "Root: \n"
            '  Item:  id="1"Hello\n'
            "  Group: \n"
            "    Leaf: x\n"
            "\n"
            "\n"
        )

    def test_childless_element_vanishes(self):
        """Test childless elements produce no output."""
        assert to_human_string(Element("empty", [("a", "b")])) == ""

    def test_no_angle_brackets(self, catalog):
        """Test no tag syntax appears for markup-free content."""
        output = to_human_string(catalog)
        assert "<" not in output
        assert ">" not in output

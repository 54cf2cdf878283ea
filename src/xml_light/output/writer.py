"""Compact and pretty renderers.

Both renderers are written against ``OutputSink`` so a tree can be rendered
into a string buffer or directly onto a stream.
"""

from xml_light.shared.config import OutputFormat
from xml_light.tree.nodes import Element, Node, PCData

from .escaping import write_attribute, write_pcdata
from .sink import OutputSink

INDENT = "  "


def human_label(tag: str) -> str:
    """Rewrite a tag name as a label for human readable output.

    Only an ASCII first letter is upper-cased.

    Example:
        >>> human_label("user_name")
        'User name: '
    """
    first = tag[:1]
    if "a" <= first <= "z":
        first = first.upper()
    return (first + tag[1:]).replace("_", " ") + ": "


def _write_attributes(sink: OutputSink, element: Element) -> None:
    for name, value in element.attributes:
        write_attribute(sink, name, value)


def write(sink: OutputSink, node: Node) -> None:
    """Render ``node`` without added whitespace.

    Two text nodes rendered back to back are separated by a single space.
    """
    after_text = False

    def loop(node: Node) -> None:
        nonlocal after_text
        if isinstance(node, PCData):
            if after_text:
                sink.add_char(" ")
            write_pcdata(sink, node.text)
            after_text = True
            return

        sink.add_char("<")
        sink.add_string(node.name)
        _write_attributes(sink, node)
        if not node.children:
            sink.add_string("/>")
        else:
            sink.add_char(">")
            after_text = False
            for child in node.children:
                loop(child)
            sink.add_string("</")
            sink.add_string(node.name)
            sink.add_char(">")
        after_text = False

    loop(node)


def write_fmt(sink: OutputSink, node: Node, fmt: OutputFormat = OutputFormat.XML) -> None:
    """Render ``node`` one item per line, indenting two spaces per level.

    With ``OutputFormat.NO_TAG`` tags are replaced by labels (see
    ``human_label``), closing tags are omitted and childless elements produce
    no output at all.
    """
    xml = fmt is OutputFormat.XML

    def open_tag(indent: str, element: Element) -> None:
        sink.add_string(indent)
        if xml:
            sink.add_char("<")
            sink.add_string(element.name)
        else:
            sink.add_string(human_label(element.name))
        _write_attributes(sink, element)

    def close_tag(element: Element) -> None:
        sink.add_string("</")
        sink.add_string(element.name)
        sink.add_char(">")

    def loop(indent: str, node: Node) -> None:
        if isinstance(node, PCData):
            sink.add_string(indent)
            write_pcdata(sink, node.text)
            sink.add_char("\n")
            return

        children = node.children
        if not children:
            if xml:
                open_tag(indent, node)
                sink.add_string("/>")
                sink.add_char("\n")
        elif len(children) == 1 and isinstance(children[0], PCData):
            open_tag(indent, node)
            if xml:
                sink.add_char(">")
            write_pcdata(sink, children[0].text)
            if xml:
                close_tag(node)
            sink.add_char("\n")
        else:
            open_tag(indent, node)
            if xml:
                sink.add_char(">")
            sink.add_char("\n")
            for child in children:
                loop(indent + INDENT, child)
            if xml:
                sink.add_string(indent)
                close_tag(node)
            sink.add_char("\n")

    loop("", node)

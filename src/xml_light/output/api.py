"""Convenience entry points for rendering trees.

Level 1: ``to_string``, ``to_string_fmt``, ``to_human_string`` return strings.
Level 2: ``write_to_stream`` and ``render`` write to a caller-owned target.
"""

from typing import Optional, TextIO

from xml_light.shared.config import OutputFormat, SerializerConfig
from xml_light.shared.logging import get_logger
from xml_light.tree.nodes import Element, Node

from .sink import BufferSink, OutputSink, StreamSink
from .writer import write, write_fmt

logger = get_logger(__name__, component="output")


def _describe(node: Node) -> str:
    return node.name if isinstance(node, Element) else "#pcdata"


def to_string(node: Node) -> str:
    """Render ``node`` compactly.

    Example:
        >>> from xml_light.tree import Element, PCData
        >>> to_string(Element("a", [("x", "1")], [PCData("hi"), Element("b")]))
        '<a x="1">hi<b/></a>'
    """
    buffer = BufferSink()
    write(buffer, node)
    logger.debug("Rendered compact output", extra={"root": _describe(node)})
    return buffer.getvalue()


def to_string_fmt(node: Node, fmt: OutputFormat = OutputFormat.XML) -> str:
    """Render ``node`` pretty-printed in the given style."""
    buffer = BufferSink()
    write_fmt(buffer, node, fmt)
    logger.debug(
        "Rendered pretty output",
        extra={"root": _describe(node), "format": fmt.name},
    )
    return buffer.getvalue()


def to_human_string(node: Node) -> str:
    """Render ``node`` pretty-printed without tags."""
    return to_string_fmt(node, OutputFormat.NO_TAG)


def render(node: Node, sink: OutputSink, config: Optional[SerializerConfig] = None) -> None:
    """Render ``node`` into ``sink`` as described by ``config``."""
    config = config or SerializerConfig()
    if config.pretty:
        write_fmt(sink, node, config.format)
    else:
        write(sink, node)
        if config.trailing_newline:
            sink.add_char("\n")


def write_to_stream(
    node: Node,
    stream: TextIO,
    fmt: Optional[OutputFormat] = None,
) -> None:
    """Render ``node`` onto ``stream`` without building an intermediate string.

    Compact output is used when ``fmt`` is None.
    """
    sink = StreamSink(stream)
    if fmt is None:
        write(sink, node)
    else:
        write_fmt(sink, node, fmt)

"""Character escaping for text content and attribute values.

Text content escapes ``< > ' "`` and ``&``, except that an ``&`` which looks
like the start of a numeric character reference (``&#`` followed by a digit
or ``x``, with at least three characters after the ``&``) is written as is.
The terminating ``;`` is not checked.

Attribute values only escape ``"``. ``&``, ``<`` and ``'`` are written
verbatim, so a value containing ``&`` or ``<`` yields output that is not
well-formed XML. This is a known limitation; see DESIGN.md.

Tabs and newlines in attribute values are also written verbatim. An XML
parser normalises them to spaces when reading the value back, so such
values do not survive a serialize/parse cycle unchanged.
"""

import re

from .sink import BufferSink, OutputSink

_TEXT_ENTITIES = {
    ">": "&gt;",
    "<": "&lt;",
    "'": "&apos;",
    '"': "&quot;",
}
_TEXT_SPECIALS = re.compile(r"[<>&'\"]")
_REFERENCE_LEADERS = frozenset("0123456789x")


def starts_char_reference(text: str, index: int) -> bool:
    """Whether the ``&`` at ``index`` opens a numeric character reference.

    Requires room for ``#``, a leading digit or ``x``, and one more character.
    """
    return (
        index < len(text) - 3
        and text[index + 1] == "#"
        and text[index + 2] in _REFERENCE_LEADERS
    )


def write_pcdata(sink: OutputSink, text: str) -> None:
    """Append ``text`` to ``sink`` with text-content escaping."""
    pos = 0
    for match in _TEXT_SPECIALS.finditer(text):
        start = match.start()
        if start > pos:
            sink.add_string(text[pos:start])
        char = match.group()
        if char != "&":
            sink.add_string(_TEXT_ENTITIES[char])
        elif starts_char_reference(text, start):
            sink.add_char("&")
        else:
            sink.add_string("&amp;")
        pos = start + 1
    if pos < len(text):
        sink.add_string(text[pos:])


def write_attribute(sink: OutputSink, name: str, value: str) -> None:
    """Append `` name="value"`` to ``sink``, escaping only double quotes."""
    sink.add_char(" ")
    sink.add_string(name)
    sink.add_string('="')
    sink.add_string(value.replace('"', "&quot;"))
    sink.add_char('"')


def escape_text(text: str) -> str:
    """Return ``text`` with text-content escaping applied.

    Examples:
        >>> escape_text("a < b & 'c'")
        'a &lt; b &amp; &apos;c&apos;'
        >>> escape_text("&#20013; &#x4e2d;")
        '&#20013; &#x4e2d;'
    """
    buffer = BufferSink()
    write_pcdata(buffer, text)
    return buffer.getvalue()


def escape_attribute_value(value: str) -> str:
    """Return ``value`` with attribute escaping applied (``"`` only)."""
    return value.replace('"', "&quot;")

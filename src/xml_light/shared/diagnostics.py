"""Error positions and diagnostic messages.

A diagnostic is a pair of an ``ErrorMessage`` (what went wrong) and an
``ErrorPosition`` (where). Positions are expressed as a line number plus
absolute character offsets so that both column-relative and absolute ranges
can be reported.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional, Tuple


class ErrorKind(Enum):
    """Kinds of structural or lexical failures reported by a parser."""

    UNTERMINATED_COMMENT = auto()
    UNTERMINATED_STRING = auto()
    UNTERMINATED_ENTITY = auto()
    IDENT_EXPECTED = auto()
    CLOSE_EXPECTED = auto()
    NODE_EXPECTED = auto()
    ATTRIBUTE_NAME_EXPECTED = auto()
    ATTRIBUTE_VALUE_EXPECTED = auto()
    END_OF_TAG_EXPECTED = auto()  # carries the tag name
    EOF_EXPECTED = auto()


_MESSAGES = {
    ErrorKind.UNTERMINATED_COMMENT: "Unterminated comment",
    ErrorKind.UNTERMINATED_STRING: "Unterminated string",
    ErrorKind.UNTERMINATED_ENTITY: "Unterminated entity",
    ErrorKind.IDENT_EXPECTED: "Ident expected",
    ErrorKind.CLOSE_EXPECTED: "Element close expected",
    ErrorKind.NODE_EXPECTED: "Xml node expected",
    ErrorKind.ATTRIBUTE_NAME_EXPECTED: "Attribute name expected",
    ErrorKind.ATTRIBUTE_VALUE_EXPECTED: "Attribute value expected",
    ErrorKind.END_OF_TAG_EXPECTED: "End of tag expected : '{tag}'",
    ErrorKind.EOF_EXPECTED: "End of file expected",
}


@dataclass(frozen=True)
class ErrorMessage:
    """A diagnostic kind plus its payload.

    Only ``END_OF_TAG_EXPECTED`` carries a payload: the name of the tag whose
    end was expected.
    """

    kind: ErrorKind
    tag: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the payload against the kind."""
        if not isinstance(self.kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if self.kind is ErrorKind.END_OF_TAG_EXPECTED:
            if self.tag is None:
                raise ValueError("END_OF_TAG_EXPECTED requires a tag name")
        elif self.tag is not None:
            raise ValueError(f"{self.kind.name} does not carry a tag name")

    @classmethod
    def end_of_tag_expected(cls, tag: str) -> "ErrorMessage":
        """Build the payload-carrying END_OF_TAG_EXPECTED message."""
        return cls(ErrorKind.END_OF_TAG_EXPECTED, tag)

    @property
    def text(self) -> str:
        """The human readable message text."""
        return error_message(self)


@dataclass(frozen=True)
class ErrorPosition:
    """Location of an erroneous span in a line-numbered source.

    Attributes:
        line: Line number of the error
        line_start: Absolute offset of the first character of that line
        min: Absolute offset where the span starts
        max: Absolute offset where the span ends
    """

    line: int
    line_start: int
    min: int
    max: int

    def __post_init__(self) -> None:
        """Validate offset ordering."""
        if not (self.line_start <= self.min <= self.max):
            raise ValueError("ErrorPosition requires line_start <= min <= max")

    @property
    def is_zero_width(self) -> bool:
        """Whether the span covers no characters."""
        return self.min == self.max


class Diagnostic(NamedTuple):
    """An (ErrorMessage, ErrorPosition) pair."""

    message: ErrorMessage
    position: ErrorPosition

    def __str__(self) -> str:
        return format_error(self.message, self.position)


def error_message(msg: ErrorMessage) -> str:
    """Return the fixed text for a diagnostic kind, interpolating the tag if any."""
    template = _MESSAGES[msg.kind]
    if msg.kind is ErrorKind.END_OF_TAG_EXPECTED:
        return template.format(tag=msg.tag)
    return template


def format_error(msg: ErrorMessage, pos: ErrorPosition) -> str:
    """Format a diagnostic as ``<message> line L character(s) ...``.

    Examples:
        >>> pos = ErrorPosition(line=3, line_start=40, min=45, max=45)
        >>> format_error(ErrorMessage(ErrorKind.IDENT_EXPECTED), pos)
        'Ident expected line 3 character 5'
        >>> pos = ErrorPosition(line=3, line_start=40, min=45, max=48)
        >>> format_error(ErrorMessage(ErrorKind.IDENT_EXPECTED), pos)
        'Ident expected line 3 characters 5-8'
    """
    start, end = column_range(pos)
    if pos.is_zero_width:
        return f"{error_message(msg)} line {pos.line} character {start}"
    return f"{error_message(msg)} line {pos.line} characters {start}-{end}"


def line(pos: ErrorPosition) -> int:
    """Line number of the error."""
    return pos.line


def column_range(pos: ErrorPosition) -> Tuple[int, int]:
    """Start and end columns relative to the start of the line."""
    return pos.min - pos.line_start, pos.max - pos.line_start


def abs_range(pos: ErrorPosition) -> Tuple[int, int]:
    """Start and end as absolute character offsets."""
    return pos.min, pos.max

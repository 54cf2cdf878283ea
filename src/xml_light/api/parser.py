"""Parsing entry points backed by lxml.

Source text is tokenized by lxml; the resulting element tree is converted into
an immutable xml-light tree by ``LxmlAdapter``. Syntax errors reported by
libxml2 are translated into ``ParseError`` diagnostics carrying an
``ErrorMessage`` and an ``ErrorPosition``.
"""

import re
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, TextIO, Union

from lxml import etree

from xml_light.shared.config import XMLLightConfig
from xml_light.shared.diagnostics import ErrorKind, ErrorMessage, ErrorPosition
from xml_light.shared.errors import ParseError, XMLFileNotFoundError
from xml_light.shared.logging import CorrelationLogger, get_logger
from xml_light.tree.nodes import Element

from .adapters import LxmlAdapter

PREVIEW_LENGTH = 100  # Max length for content preview in logs

# libxml2 error names (lxml.etree.ErrorTypes) and the diagnostic kind each maps to.
_LIBXML2_ERRORS = {
    "ERR_COMMENT_NOT_FINISHED": ErrorKind.UNTERMINATED_COMMENT,
    "ERR_LITERAL_NOT_FINISHED": ErrorKind.UNTERMINATED_STRING,
    "ERR_STRING_NOT_CLOSED": ErrorKind.UNTERMINATED_STRING,
    "ERR_ATTRIBUTE_NOT_FINISHED": ErrorKind.UNTERMINATED_STRING,
    "ERR_ENTITYREF_SEMICOL_MISSING": ErrorKind.UNTERMINATED_ENTITY,
    "ERR_NAME_REQUIRED": ErrorKind.IDENT_EXPECTED,
    "ERR_GT_REQUIRED": ErrorKind.CLOSE_EXPECTED,
    "ERR_LTSLASH_REQUIRED": ErrorKind.CLOSE_EXPECTED,
    "ERR_DOCUMENT_EMPTY": ErrorKind.NODE_EXPECTED,
    "ERR_DOCUMENT_START": ErrorKind.NODE_EXPECTED,
    "ERR_SPACE_REQUIRED": ErrorKind.ATTRIBUTE_NAME_EXPECTED,
    "ERR_ATTRIBUTE_WITHOUT_VALUE": ErrorKind.ATTRIBUTE_VALUE_EXPECTED,
    "ERR_ATTRIBUTE_NOT_STARTED": ErrorKind.ATTRIBUTE_VALUE_EXPECTED,
    "ERR_EQUAL_REQUIRED": ErrorKind.ATTRIBUTE_VALUE_EXPECTED,
    "ERR_TAG_NAME_MISMATCH": ErrorKind.END_OF_TAG_EXPECTED,
    "ERR_TAG_NOT_FINISHED": ErrorKind.END_OF_TAG_EXPECTED,
    "ERR_DOCUMENT_END": ErrorKind.EOF_EXPECTED,
}

_ERROR_KINDS: Dict[int, ErrorKind] = {
    getattr(etree.ErrorTypes, name): kind
    for name, kind in _LIBXML2_ERRORS.items()
    if hasattr(etree.ErrorTypes, name)
}

# "Opening and ending tag mismatch: a line 1 and b", "Premature end of data in tag a line 1"
_OPEN_TAG_PATTERN = re.compile(r"(?:mismatch:|in tag)\s+(\S+)")

SourceType = Union[str, bytes]


def line_start_offset(source: str, lineno: int) -> int:
    """Absolute offset of the first character of 1-based line ``lineno``."""
    offset = 0
    for _ in range(max(lineno, 1) - 1):
        newline = source.find("\n", offset)
        if newline == -1:
            return len(source)
        offset = newline + 1
    return offset


def error_message_from_code(code: Optional[int], text: str) -> ErrorMessage:
    """Map a libxml2 error code and message onto an ``ErrorMessage``.

    Unknown codes map to ``NODE_EXPECTED``.
    """
    kind = _ERROR_KINDS.get(code, ErrorKind.NODE_EXPECTED)
    if kind is ErrorKind.END_OF_TAG_EXPECTED:
        match = _OPEN_TAG_PATTERN.search(text)
        if match is None:
            return ErrorMessage(ErrorKind.CLOSE_EXPECTED)
        return ErrorMessage.end_of_tag_expected(match.group(1))
    return ErrorMessage(kind)


def position_from_location(source: str, lineno: Optional[int], column: Optional[int]) -> ErrorPosition:
    """Build a zero-width ``ErrorPosition`` from a 1-based line and column."""
    line = max(lineno or 1, 1)
    start = line_start_offset(source, line)
    line_end = source.find("\n", start)
    if line_end == -1:
        line_end = len(source)
    offset = min(start + max((column or 1) - 1, 0), line_end)
    return ErrorPosition(line=line, line_start=start, min=offset, max=offset)


def diagnostic_from_syntax_error(error: Any, source: str) -> ParseError:
    """Translate an ``lxml.etree.XMLSyntaxError`` into a ``ParseError``."""
    lineno, column = getattr(error, "position", (None, None)) or (None, None)
    message = error_message_from_code(getattr(error, "code", None), str(error))
    return ParseError(message, position_from_location(source, lineno, column))


def _make_parser(config: XMLLightConfig, encoding: Optional[str]) -> etree.XMLParser:
    # External entities stay unexpanded references, dropped during conversion
    resolve_entities = "internal" if config.parser.resolve_entities else False
    return etree.XMLParser(
        encoding=encoding,
        remove_comments=True,
        remove_pis=True,
        resolve_entities=resolve_entities,
        strip_cdata=config.parser.strip_cdata,
        huge_tree=config.parser.huge_tree,
        load_dtd=False,
        no_network=True,
    )


def _parse_source(source: SourceType, config: XMLLightConfig, logger: CorrelationLogger) -> Element:
    encoding = None
    if isinstance(source, str):
        text = source
        data = source.encode("utf-8")
        encoding = "utf-8"  # overrides any encoding declared in the text
    else:
        data = source
        text = source.decode("utf-8", errors="replace")

    limit = config.parser.max_input_size_bytes
    if limit is not None and len(data) > limit:
        raise ValueError(f"Input of {len(data)} bytes exceeds max_input_size_bytes={limit}")

    logger.debug(
        "Starting parse",
        extra={
            "content_length": len(text),
            "preview": text[:PREVIEW_LENGTH],
        },
    )
    try:
        root = etree.fromstring(data, _make_parser(config, encoding))
    except etree.XMLSyntaxError as e:
        error = diagnostic_from_syntax_error(e, text)
        logger.info(
            "Parse failed",
            extra={"diagnostic": str(error), "libxml2_message": str(e)},
        )
        raise error from e

    adapter = LxmlAdapter(config.global_.correlation_id)
    tree = adapter.to_node(root, keep_whitespace=config.parser.keep_whitespace)
    logger.debug("Parse finished", extra={"root": tree.name})
    return tree


def parse_string(text: SourceType, config: Optional[XMLLightConfig] = None) -> Element:
    """Parse a document held in memory and return its root element.

    Args:
        text: Document as ``str`` or raw ``bytes``
        config: Optional configuration (parser and global sections are used)

    Raises:
        ParseError: If the document is not well-formed

    Examples:
        >>> root = parse_string('<a x="1">hi<b/></a>')
        >>> root.name, root.attributes
        ('a', (('x', '1'),))
    """
    config = config or XMLLightConfig()
    logger = get_logger(__name__, config.global_.correlation_id, "parse_string")
    return _parse_source(text, config, logger)


def parse_in(stream: Union[TextIO, BinaryIO], config: Optional[XMLLightConfig] = None) -> Element:
    """Parse a document read from an open text or binary stream."""
    config = config or XMLLightConfig()
    logger = get_logger(__name__, config.global_.correlation_id, "parse_in")
    return _parse_source(stream.read(), config, logger)


def parse_file(file_path: Union[str, Path], config: Optional[XMLLightConfig] = None) -> Element:
    """Parse a document stored on disk.

    Raises:
        XMLFileNotFoundError: If ``file_path`` does not exist
        ParseError: If the document is not well-formed
    """
    config = config or XMLLightConfig()
    logger = get_logger(__name__, config.global_.correlation_id, "parse_file")
    path_obj = Path(file_path)

    logger.debug("Reading file", extra={"file_path": str(path_obj)})
    if not path_obj.is_file():
        raise XMLFileNotFoundError(str(path_obj))
    return _parse_source(path_obj.read_bytes(), config, logger)

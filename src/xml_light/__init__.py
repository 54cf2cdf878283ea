"""xml-light.

A small XML toolkit: an immutable document tree, capability-checked
accessors, and a serializer with compact, pretty and human readable styles.

Progressive API Disclosure:
- Level 1: Simple functions - parse_string(), to_string(), to_string_fmt(), to_human_string()
- Level 2: Sinks and configuration - write(), write_fmt(), render(), XMLLightConfig
- Level 3: Adapters - lxml, ElementTree and BeautifulSoup conversion
"""

__version__ = "0.1.0"
__author__ = "xml-light developers"

from .api import get_adapter, parse_file, parse_in, parse_string
from .output import (
    BufferSink,
    CallbackSink,
    OutputSink,
    StreamSink,
    render,
    to_human_string,
    to_string,
    to_string_fmt,
    write,
    write_fmt,
    write_to_stream,
)
from .shared import (
    Diagnostic,
    ErrorKind,
    ErrorMessage,
    ErrorPosition,
    NoAttributeError,
    NotElementError,
    NotPCDataError,
    OutputFormat,
    ParseError,
    XMLFileNotFoundError,
    XMLLightConfig,
    XMLLightError,
    abs_range,
    column_range,
    error_message,
    format_error,
    line,
)
from .tree import (
    Element,
    Node,
    PCData,
    attribute,
    attributes,
    children,
    fold_children,
    for_each,
    map_children,
    tag_name,
    text,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Tree model and accessors
    "Element",
    "Node",
    "PCData",
    "attribute",
    "attributes",
    "children",
    "fold_children",
    "for_each",
    "map_children",
    "tag_name",
    "text",

    # Serialization
    "BufferSink",
    "CallbackSink",
    "OutputSink",
    "StreamSink",
    "OutputFormat",
    "render",
    "to_human_string",
    "to_string",
    "to_string_fmt",
    "write",
    "write_fmt",
    "write_to_stream",

    # Parsing and adapters
    "get_adapter",
    "parse_file",
    "parse_in",
    "parse_string",

    # Diagnostics and errors
    "Diagnostic",
    "ErrorKind",
    "ErrorMessage",
    "ErrorPosition",
    "abs_range",
    "column_range",
    "error_message",
    "format_error",
    "line",
    "NoAttributeError",
    "NotElementError",
    "NotPCDataError",
    "ParseError",
    "XMLFileNotFoundError",
    "XMLLightError",

    # Configuration
    "XMLLightConfig",
]

"""Shared building blocks for xml-light.

Diagnostics, the exception hierarchy, configuration objects and logging
helpers used across the tree, output and api layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    GlobalConfig,
    OutputFormat,
    ParserConfig,
    SerializerConfig,
    XMLLightConfig,
)
from .diagnostics import (
    Diagnostic,
    ErrorKind,
    ErrorMessage,
    ErrorPosition,
    abs_range,
    column_range,
    error_message,
    format_error,
    line,
)
from .errors import (
    AdapterError,
    NoAttributeError,
    NotElementError,
    NotPCDataError,
    ParseError,
    XMLFileNotFoundError,
    XMLLightError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "GlobalConfig",
    "OutputFormat",
    "ParserConfig",
    "SerializerConfig",
    "XMLLightConfig",
    "Diagnostic",
    "ErrorKind",
    "ErrorMessage",
    "ErrorPosition",
    "abs_range",
    "column_range",
    "error_message",
    "format_error",
    "line",
    "AdapterError",
    "NoAttributeError",
    "NotElementError",
    "NotPCDataError",
    "ParseError",
    "XMLFileNotFoundError",
    "XMLLightError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]

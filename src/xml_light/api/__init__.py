"""Parsing entry points and third-party library adapters."""

from .adapters import (
    AdapterMetadata,
    AdapterRegistry,
    AdapterType,
    BeautifulSoupAdapter,
    ElementTreeAdapter,
    LxmlAdapter,
    TreeAdapter,
    get_adapter,
    list_available_adapters,
    register_adapter,
)
from .parser import parse_file, parse_in, parse_string

__all__ = [
    "AdapterMetadata",
    "AdapterRegistry",
    "AdapterType",
    "BeautifulSoupAdapter",
    "ElementTreeAdapter",
    "LxmlAdapter",
    "TreeAdapter",
    "get_adapter",
    "list_available_adapters",
    "register_adapter",
    "parse_file",
    "parse_in",
    "parse_string",
]

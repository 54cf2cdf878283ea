"""Conversion adapters between xml-light trees and popular XML libraries.

Each adapter converts a third-party element into an ``Element`` and back.
Text and tail strings become ``PCData`` children in document order; comments,
processing instructions and unresolved entity references are dropped.
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Type

from xml_light.shared.errors import AdapterError
from xml_light.shared.logging import get_logger
from xml_light.tree.nodes import Element, Node, PCData

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class AdapterType(Enum):
    """Types of integration adapters."""

    XML_LIBRARY = auto()     # Element-tree style libraries (lxml, ElementTree)
    HTML_LIBRARY = auto()    # Soup style libraries (BeautifulSoup)
    PLUGIN = auto()          # Custom plugin adapters


@dataclass
class AdapterMetadata:
    """Metadata about an integration adapter."""

    name: str
    adapter_type: AdapterType
    target_library: str
    description: str


def _keep_text(value: Optional[str], keep_whitespace: bool) -> bool:
    return bool(value) and (keep_whitespace or not value.isspace())


def _join_text(existing: Optional[str], addition: str) -> str:
    # Adjacent PCData runs are separated by one space, as the compact writer does.
    return addition if existing is None else f"{existing} {addition}"


class TreeAdapter(ABC):
    """Abstract base class for all tree adapters.

    Subclasses convert between ``Node`` values and the element type of a
    target library. Conversion errors are raised as ``AdapterError``.
    """

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize the adapter.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, self.__class__.__name__)

    @property
    @abstractmethod
    def metadata(self) -> AdapterMetadata:
        """Get adapter metadata."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the target library can be imported."""

    @abstractmethod
    def to_node(self, target: Any, keep_whitespace: bool = False) -> Element:
        """Convert a target library element into an ``Element``.

        Args:
            target: Element of the target library
            keep_whitespace: Keep whitespace-only text runs

        Returns:
            The converted tree
        """

    @abstractmethod
    def from_node(self, node: Node) -> Any:
        """Convert an ``Element`` into the target library's representation."""


class _EtreeAdapter(TreeAdapter):
    """Shared logic for libraries following the ElementTree API."""

    def _element_factory(self) -> Callable[[str], Any]:
        raise NotImplementedError

    def _tag_name(self, element: Any) -> str:
        return element.tag

    def _attributes(self, element: Any) -> List[Any]:
        return list(element.attrib.items())

    def _convert(self, element: Any, keep_whitespace: bool) -> Element:
        children: List[Node] = []
        if _keep_text(element.text, keep_whitespace):
            children.append(PCData(element.text))
        for child in element:
            if isinstance(child.tag, str):
                children.append(self._convert(child, keep_whitespace))
            if _keep_text(child.tail, keep_whitespace):
                children.append(PCData(child.tail))
        return Element(self._tag_name(element), self._attributes(element), children)

    def to_node(self, target: Any, keep_whitespace: bool = False) -> Element:
        """Convert an ElementTree-style element into an ``Element``."""
        if not isinstance(getattr(target, "tag", None), str):
            raise AdapterError(f"{self.metadata.name}: not an element: {target!r}")
        try:
            node = self._convert(target, keep_whitespace)
        except (TypeError, ValueError) as e:
            raise AdapterError(f"{self.metadata.name}: conversion failed: {e}") from e
        self._logger.debug("Converted element to node", extra={"tag": node.name})
        return node

    def from_node(self, node: Node) -> Any:
        """Convert an ``Element`` into an ElementTree-style element.

        Duplicate attribute names collapse to the last value.
        """
        if not isinstance(node, Element):
            raise AdapterError(f"{self.metadata.name}: root must be an element")
        try:
            return self._build(node, self._element_factory())
        except (TypeError, ValueError) as e:
            raise AdapterError(f"{self.metadata.name}: conversion failed: {e}") from e

    def _build(self, node: Element, factory: Callable[[str], Any]) -> Any:
        element = factory(node.name)
        for name, value in node.attributes:
            element.set(name, value)
        last = None
        for child in node.children:
            if isinstance(child, PCData):
                if last is None:
                    element.text = _join_text(element.text, child.text)
                else:
                    last.tail = _join_text(last.tail, child.text)
            else:
                last = self._build(child, factory)
                element.append(last)
        return element


class LxmlAdapter(_EtreeAdapter):
    """Adapter for ``lxml.etree`` elements.

    Namespaced names are written back with their source prefix, and namespace
    declarations introduced on an element are restored as ``xmlns``
    attributes, so documents survive a parse/serialize cycle textually.
    """

    @property
    def metadata(self) -> AdapterMetadata:
        return AdapterMetadata(
            name="lxml",
            adapter_type=AdapterType.XML_LIBRARY,
            target_library="lxml",
            description="Conversion between xml-light trees and lxml.etree",
        )

    def is_available(self) -> bool:
        try:
            import lxml.etree  # noqa: F401
            return True
        except ImportError:
            return False

    def _element_factory(self) -> Callable[[str], Any]:
        from lxml import etree
        return etree.Element

    def _qualified(self, name: str, element: Any) -> str:
        from lxml import etree

        if not name.startswith("{"):
            return name
        qname = etree.QName(name)
        if qname.namespace == XML_NAMESPACE:
            return f"xml:{qname.localname}"
        for prefix, uri in element.nsmap.items():
            if prefix and uri == qname.namespace:
                return f"{prefix}:{qname.localname}"
        return qname.localname

    def _tag_name(self, element: Any) -> str:
        if element.prefix:
            from lxml import etree
            return f"{element.prefix}:{etree.QName(element).localname}"
        return self._qualified(element.tag, element)

    def _attributes(self, element: Any) -> List[Any]:
        parent = element.getparent()
        inherited = parent.nsmap if parent is not None else {}
        declarations = [
            ("xmlns" if prefix is None else f"xmlns:{prefix}", uri)
            for prefix, uri in element.nsmap.items()
            if inherited.get(prefix) != uri
        ]
        return declarations + [
            (self._qualified(name, element), value)
            for name, value in element.attrib.items()
        ]


class ElementTreeAdapter(_EtreeAdapter):
    """Adapter for ``xml.etree.ElementTree`` elements.

    Namespaced names are kept in ElementTree's ``{uri}local`` form.
    """

    @property
    def metadata(self) -> AdapterMetadata:
        return AdapterMetadata(
            name="elementtree",
            adapter_type=AdapterType.XML_LIBRARY,
            target_library="xml.etree.ElementTree",
            description="Conversion between xml-light trees and ElementTree",
        )

    def is_available(self) -> bool:
        return True

    def _element_factory(self) -> Callable[[str], Any]:
        import xml.etree.ElementTree as ET
        return ET.Element


class BeautifulSoupAdapter(TreeAdapter):
    """Adapter for BeautifulSoup documents and tags."""

    @property
    def metadata(self) -> AdapterMetadata:
        return AdapterMetadata(
            name="beautifulsoup",
            adapter_type=AdapterType.HTML_LIBRARY,
            target_library="beautifulsoup4",
            description="Conversion between xml-light trees and BeautifulSoup",
        )

    def is_available(self) -> bool:
        try:
            from bs4 import BeautifulSoup  # noqa: F401
            return True
        except ImportError:
            return False

    def to_node(self, target: Any, keep_whitespace: bool = False) -> Element:
        """Convert a ``bs4.Tag`` (or the first element of a soup) into an ``Element``.

        Multi-valued attributes such as ``class`` are joined with spaces.
        """
        from bs4 import BeautifulSoup, Tag

        if isinstance(target, BeautifulSoup):
            root = target.find(True)
            if root is None:
                raise AdapterError("beautifulsoup: document has no elements")
            target = root
        if not isinstance(target, Tag):
            raise AdapterError(f"beautifulsoup: not a tag: {target!r}")

        node = self._convert(target, keep_whitespace)
        self._logger.debug("Converted tag to node", extra={"tag": node.name})
        return node

    def _convert(self, tag: Any, keep_whitespace: bool) -> Element:
        from bs4 import NavigableString, Tag
        from bs4.element import CData, PreformattedString

        children: List[Node] = []
        for child in tag.children:
            if isinstance(child, Tag):
                children.append(self._convert(child, keep_whitespace))
            elif isinstance(child, PreformattedString) and not isinstance(child, CData):
                continue
            elif isinstance(child, NavigableString) and _keep_text(str(child), keep_whitespace):
                children.append(PCData(str(child)))

        attributes = [
            (name, " ".join(value) if isinstance(value, list) else value)
            for name, value in tag.attrs.items()
        ]
        return Element(tag.name, attributes, children)

    def from_node(self, node: Node) -> Any:
        """Render ``node`` compactly and load it with BeautifulSoup's XML parser."""
        from bs4 import BeautifulSoup

        from xml_light.output.api import to_string

        if not isinstance(node, Element):
            raise AdapterError("beautifulsoup: root must be an element")
        return BeautifulSoup(to_string(node), "xml")


class AdapterRegistry:
    """Registry for managing tree adapters."""

    def __init__(self) -> None:
        self._adapters: Dict[str, Type[TreeAdapter]] = {}
        self._lock = threading.RLock()

    def register(self, adapter_class: Type[TreeAdapter]) -> None:
        """Register an adapter class under its metadata name."""
        with self._lock:
            metadata = adapter_class().metadata
            self._adapters[metadata.name] = adapter_class

    def get_adapter(
        self,
        adapter_name: str,
        correlation_id: Optional[str] = None
    ) -> Optional[TreeAdapter]:
        """Get an adapter instance by name.

        Returns:
            Adapter instance if registered and available, None otherwise
        """
        with self._lock:
            adapter_class = self._adapters.get(adapter_name)
        if adapter_class is None:
            return None
        instance = adapter_class(correlation_id)
        return instance if instance.is_available() else None

    def list_available_adapters(self) -> List[AdapterMetadata]:
        """List metadata of every registered adapter whose library is importable."""
        with self._lock:
            classes = list(self._adapters.values())
        instances = [adapter_class() for adapter_class in classes]
        return [instance.metadata for instance in instances if instance.is_available()]


_adapter_registry = AdapterRegistry()


def register_adapter(adapter_class: Type[TreeAdapter]) -> None:
    """Register a tree adapter globally."""
    _adapter_registry.register(adapter_class)


def get_adapter(
    adapter_name: str,
    correlation_id: Optional[str] = None
) -> Optional[TreeAdapter]:
    """Get a registered adapter instance, or None if unknown or unavailable."""
    return _adapter_registry.get_adapter(adapter_name, correlation_id)


def list_available_adapters() -> List[AdapterMetadata]:
    """List all available tree adapters."""
    return _adapter_registry.list_available_adapters()


for _adapter_class in (LxmlAdapter, ElementTreeAdapter, BeautifulSoupAdapter):
    register_adapter(_adapter_class)

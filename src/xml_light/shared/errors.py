"""Exception hierarchy for xml-light.

Accessor misuse, parse failures and adapter failures all derive from
``XMLLightError``. Accessor errors additionally subclass the closest builtin
(``TypeError`` / ``LookupError``) so generic handlers keep working.
"""

from typing import TYPE_CHECKING

from .diagnostics import Diagnostic, ErrorMessage, ErrorPosition, format_error

if TYPE_CHECKING:
    from xml_light.tree.nodes import Node


class XMLLightError(Exception):
    """Base exception for all xml-light errors."""


class NotElementError(XMLLightError, TypeError):
    """Raised when an element-only operation is applied to a text node."""

    def __init__(self, node: "Node") -> None:
        super().__init__(f"Not an element: {node!r}")
        self.node = node


class NotPCDataError(XMLLightError, TypeError):
    """Raised when a text-only operation is applied to an element."""

    def __init__(self, node: "Node") -> None:
        super().__init__(f"Not a text node: {node!r}")
        self.node = node


class NoAttributeError(XMLLightError, LookupError):
    """Raised when an element has no attribute with the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such attribute: {name!r}")
        self.name = name


class ParseError(XMLLightError):
    """A diagnostic raised by the parser collaborator.

    Attributes:
        message: What went wrong
        position: Where it went wrong
    """

    def __init__(self, message: ErrorMessage, position: ErrorPosition) -> None:
        super().__init__(format_error(message, position))
        self.message = message
        self.position = position

    @property
    def diagnostic(self) -> Diagnostic:
        """The (message, position) pair."""
        return Diagnostic(self.message, self.position)


class XMLFileNotFoundError(XMLLightError, FileNotFoundError):
    """Raised when a document file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class AdapterError(XMLLightError):
    """Raised when a tree cannot be converted to or from a third-party library."""

"""Capability-checked accessors over the document tree.

Element-only operations raise ``NotElementError`` when given a ``PCData``;
``text`` raises ``NotPCDataError`` when given an ``Element``. Iteration
helpers visit direct children only, in document order.
"""

from typing import Callable, List, Tuple, TypeVar

from xml_light.shared.errors import NoAttributeError, NotElementError, NotPCDataError

from .nodes import Attribute, Element, Node, PCData

T = TypeVar("T")
A = TypeVar("A")


def _element(node: Node) -> Element:
    if isinstance(node, Element):
        return node
    raise NotElementError(node)


def tag_name(node: Node) -> str:
    """Return the tag name of an element."""
    return _element(node).name


def text(node: Node) -> str:
    """Return the raw text of a text node."""
    if isinstance(node, PCData):
        return node.text
    raise NotPCDataError(node)


def attributes(node: Node) -> Tuple[Attribute, ...]:
    """Return the ordered (name, value) attribute pairs of an element."""
    return tuple(_element(node).attributes)


def attribute(node: Node, name: str) -> str:
    """Look up an attribute value, ignoring case.

    The first attribute whose name matches wins when duplicates exist.

    Raises:
        NotElementError: If ``node`` is a text node
        NoAttributeError: If no attribute matches ``name``

    Example:
        >>> attribute(Element("e", [("Id", "1")]), "id")
        '1'
    """
    element = _element(node)
    wanted = name.lower()
    for attr_name, value in element.attributes:
        if attr_name.lower() == wanted:
            return value
    raise NoAttributeError(name)


def children(node: Node) -> Tuple[Node, ...]:
    """Return the ordered children of an element."""
    return tuple(_element(node).children)


def for_each(node: Node, f: Callable[[Node], None]) -> None:
    """Call ``f`` on each direct child."""
    for child in _element(node).children:
        f(child)


def map_children(node: Node, f: Callable[[Node], T]) -> List[T]:
    """Return ``[f(child) for child in children(node)]``.

    The result is a plain list; rebuilding a tree from it is up to the caller.
    """
    return [f(child) for child in _element(node).children]


def fold_children(node: Node, init: A, f: Callable[[A, Node], A]) -> A:
    """Left fold ``f(acc, child)`` over the direct children."""
    acc = init
    for child in _element(node).children:
        acc = f(acc, child)
    return acc

"""Immutable document tree.

A tree is built from two node types: ``Element`` (tag name, ordered
attributes, ordered children) and ``PCData`` (raw text). Text is stored
unescaped; escaping only happens when a tree is serialized.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Sequence, Tuple, Union

Attribute = Tuple[str, str]


@dataclass(frozen=True)
class PCData:
    """Raw character data."""

    text: str

    def __post_init__(self) -> None:
        """Validate text content."""
        if not isinstance(self.text, str):
            raise TypeError("PCData text must be a string")

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to dictionary representation."""
        return {"text": self.text}


@dataclass(frozen=True)
class Element:
    """An element with a tag name, ordered attributes and ordered children.

    Attributes keep insertion order and duplicates; lookups through
    ``xml_light.tree.access.attribute`` are case-insensitive and return the
    first match. Lists passed in are stored as tuples so the node stays
    immutable and hashable.
    """

    name: str
    attributes: Sequence[Attribute] = ()
    children: Sequence["Node"] = ()

    def __post_init__(self) -> None:
        """Validate the tag and normalise sequences to tuples."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Element tag cannot be empty")

        attributes = tuple(_check_attribute(pair) for pair in self.attributes)
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, (Element, PCData)):
                raise TypeError(
                    f"Element children must be Element or PCData, got {type(child).__name__}"
                )

        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "children", children)

    @property
    def is_childless(self) -> bool:
        """Whether the element renders self-closing."""
        return not self.children

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "tag": self.name,
            "attributes": [list(pair) for pair in self.attributes],
        }
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


Node = Union[Element, PCData]


def _check_attribute(pair: Iterable[str]) -> Attribute:
    name, value = pair
    if not isinstance(name, str) or not isinstance(value, str):
        raise TypeError("Attribute name and value must be strings")
    if not name:
        raise ValueError("Attribute name cannot be empty")
    return name, value


def from_dict(data: Dict[str, Any]) -> Node:
    """Rebuild a node from the output of ``to_dict``."""
    if "tag" in data:
        return Element(
            data["tag"],
            [tuple(pair) for pair in data.get("attributes", [])],
            [from_dict(child) for child in data.get("children", [])],
        )
    return PCData(data["text"])

"""Document tree model and accessors."""

from .access import (
    attribute,
    attributes,
    children,
    fold_children,
    for_each,
    map_children,
    tag_name,
    text,
)
from .nodes import Attribute, Element, Node, PCData, from_dict

__all__ = [
    "Attribute",
    "Element",
    "Node",
    "PCData",
    "from_dict",
    "attribute",
    "attributes",
    "children",
    "fold_children",
    "for_each",
    "map_children",
    "tag_name",
    "text",
]

"""Template for creating custom tree adapters.

This template provides a starting point for developers who want to convert
xml-light trees to and from another library's representation.

Copy this template and modify it according to your target library. The
example converts to and from plain nested dictionaries.
"""

from typing import Any

from xml_light.api.adapters import (
    AdapterMetadata,
    AdapterType,
    TreeAdapter,
    register_adapter,
)
from xml_light.shared.errors import AdapterError
from xml_light.tree.nodes import Element, Node, PCData, from_dict


class MyCustomAdapter(TreeAdapter):
    """Custom adapter template - replace with your implementation.

    This adapter converts between ``Element`` trees and nested dictionaries
    shaped like ``Element.to_dict()``.
    """

    @property
    def metadata(self) -> AdapterMetadata:
        """Get adapter metadata."""
        return AdapterMetadata(
            name="my-custom-adapter",  # Replace with your adapter name
            adapter_type=AdapterType.PLUGIN,
            target_library="builtins.dict",  # Replace with actual library name
            description="Conversion between xml-light trees and nested dicts",
        )

    def is_available(self) -> bool:
        """Check if the target library is available."""
        # Replace with an import check for your target library
        return True

    def to_node(self, target: Any, keep_whitespace: bool = False) -> Element:
        """Convert a nested dictionary into an ``Element``."""
        if not isinstance(target, dict) or "tag" not in target:
            raise AdapterError(f"{self.metadata.name}: not an element mapping")
        try:
            node = from_dict(target)
        except (KeyError, TypeError, ValueError) as e:
            raise AdapterError(f"{self.metadata.name}: conversion failed: {e}") from e
        if not keep_whitespace:
            node = _strip_whitespace(node)
        self._logger.debug("Converted mapping to node", extra={"tag": node.name})
        return node

    def from_node(self, node: Node) -> Any:
        """Convert an ``Element`` into a nested dictionary."""
        if not isinstance(node, Element):
            raise AdapterError(f"{self.metadata.name}: root must be an element")
        return node.to_dict()


def _strip_whitespace(element: Element) -> Element:
    kept = []
    for child in element.children:
        if isinstance(child, PCData):
            if not child.text.isspace():
                kept.append(child)
        else:
            kept.append(_strip_whitespace(child))
    return Element(element.name, element.attributes, kept)


# Example usage and testing
if __name__ == "__main__":
    from xml_light import get_adapter, parse_string

    register_adapter(MyCustomAdapter)
    adapter = get_adapter("my-custom-adapter")

    root = parse_string("<root><item>test</item></root>")
    data = adapter.from_node(root)
    print(f"Converted data: {data}")

    restored = adapter.to_node(data)
    print("Reverse conversion successful!" if restored == root else "Reverse conversion differs")

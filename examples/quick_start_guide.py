#!/usr/bin/env python3
"""
Quick Start Guide for xml-light.

Builds a small tree by hand, parses another from text, reads it back through
the accessors and renders it in the three output styles.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_light import (
    Element, PCData, ParseError, NoAttributeError,
    attribute, children, fold_children, tag_name, text,
    parse_string, to_string, to_string_fmt, to_human_string,
)


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - xml-light")
    print("=" * 30)

    # Step 1: Build a tree
    print("\n📄 Step 1: Building a Tree")
    print("-" * 30)

    book = Element("book", [("id", "123"), ("genre", "fiction")], [
        Element("title", [], [PCData("My Book")]),
        Element("author", [], [PCData("John Doe")]),
        Element("price", [("currency", "USD")], [PCData("19.99")]),
        Element("in_stock"),
    ])
    print(f"✅ Built <{tag_name(book)}> with {len(children(book))} children")

    # Step 2: Read it back
    print("\n🧭 Step 2: Accessors")
    print("-" * 30)

    title = children(book)[0]
    print(f"📖 Title: {text(children(title)[0])}")
    print(f"🔑 ID (looked up as 'ID'): {attribute(book, 'ID')}")
    try:
        attribute(book, "isbn")
    except NoAttributeError as e:
        print(f"⚠️  {e}")

    element_count = fold_children(
        book, 0, lambda acc, child: acc + isinstance(child, Element)
    )
    print(f"📊 Element children: {element_count}")

    # Step 3: Render
    print("\n🔄 Step 3: Output Styles")
    print("-" * 30)

    print("📋 Compact:")
    print(to_string(book))
    print("\n📋 Pretty XML:")
    print(to_string_fmt(book), end="")
    print("\n📋 Human readable:")
    print(to_human_string(book), end="")

    print("\n🎉 Quick start complete!")


def parsing_example():
    """Example showing parsing and diagnostics."""

    print("\n\n🔍 PARSING EXAMPLE")
    print("=" * 30)

    root = parse_string('<order no="7">\n  <item qty="2">Tea &amp; cake</item>\n</order>')
    print(f"✅ Parsed: {to_string(root)}")

    broken = "<order>\n  <item>\n</order>"
    try:
        parse_string(broken)
    except ParseError as e:
        print(f"❌ {e}")
        print(f"   kind={e.message.kind.name} offsets={e.position.min}-{e.position.max}")


def main():
    """Main function."""
    quick_start_example()
    parsing_example()

    print("\n✅ All examples completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

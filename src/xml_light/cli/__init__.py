"""Command-line interface for xml-light.

Re-renders documents in compact, pretty or human readable style and checks
documents for well-formedness.
"""

from .main import main

__all__ = ["main"]

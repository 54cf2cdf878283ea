"""Append-only text sinks used by the serializer.

The writer only needs two operations, appending one character and appending a
string, and issues them strictly in document order. Anything offering those
two methods can be rendered into.
"""

from typing import Callable, List, Protocol, TextIO, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Structural type for serializer targets."""

    def add_char(self, char: str) -> None:
        ...

    def add_string(self, string: str) -> None:
        ...


class BufferSink:
    """Growable in-memory buffer."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def add_char(self, char: str) -> None:
        self._parts.append(char)

    def add_string(self, string: str) -> None:
        self._parts.append(string)

    def getvalue(self) -> str:
        """Return everything appended so far."""
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)


class StreamSink:
    """Adapter writing straight to a text stream (file, socket wrapper, stdout)."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def add_char(self, char: str) -> None:
        self.stream.write(char)

    def add_string(self, string: str) -> None:
        self.stream.write(string)


class CallbackSink:
    """Sink built from two callables."""

    def __init__(
        self,
        add_char: Callable[[str], None],
        add_string: Callable[[str], None],
    ) -> None:
        self._add_char = add_char
        self._add_string = add_string

    def add_char(self, char: str) -> None:
        self._add_char(char)

    def add_string(self, string: str) -> None:
        self._add_string(string)

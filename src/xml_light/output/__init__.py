"""Serialization of document trees: escaping, sinks and renderers."""

from .api import render, to_human_string, to_string, to_string_fmt, write_to_stream
from .escaping import escape_attribute_value, escape_text, write_attribute, write_pcdata
from .sink import BufferSink, CallbackSink, OutputSink, StreamSink
from .writer import human_label, write, write_fmt

__all__ = [
    "render",
    "to_human_string",
    "to_string",
    "to_string_fmt",
    "write_to_stream",
    "escape_attribute_value",
    "escape_text",
    "write_attribute",
    "write_pcdata",
    "BufferSink",
    "CallbackSink",
    "OutputSink",
    "StreamSink",
    "human_label",
    "write",
    "write_fmt",
]

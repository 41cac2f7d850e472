"""Domain ports - interfaces for wrapped streams to implement."""

from .stream_port import (
    AsyncReadableStream,
    AsyncWritableStream,
    ReadableStream,
    ReadIntoStream,
    WritableStream,
)

__all__ = [
    "WritableStream",
    "ReadableStream",
    "ReadIntoStream",
    "AsyncWritableStream",
    "AsyncReadableStream",
]

"""Stream ports - the primitive operations a wrapped stream must offer."""

from typing import Protocol


class WritableStream(Protocol):
    """Anything with a single-shot ``write``.

    ``write`` returns the number of bytes accepted. ``None`` means the
    write would block and nothing was accepted, as for raw streams.
    """

    def write(self, data: bytes | memoryview, /) -> int | None: ...


class ReadableStream(Protocol):
    """Anything with a single-shot ``read`` returning ``b""`` at end of stream."""

    def read(self, size: int, /) -> bytes | None: ...


class ReadIntoStream(Protocol):
    """Anything with a single-shot ``readinto`` returning 0 at end of stream.

    ``None`` means no data is available yet from a non-blocking source.
    """

    def readinto(self, buffer: memoryview, /) -> int | None: ...


class AsyncWritableStream(Protocol):
    """asyncio.StreamWriter-like sink."""

    def write(self, data: bytes, /) -> None: ...

    async def drain(self) -> None: ...


class AsyncReadableStream(Protocol):
    """asyncio.StreamReader-like source."""

    async def read(self, n: int = -1, /) -> bytes: ...

"""Shared test fixtures and configuration."""

import pytest

from bytepace.domain import RateLimitConfig

# ============= Domain Fixtures =============


@pytest.fixture
def one_byte_config():
    """10 Bps with the default interval: one byte per slice."""
    return RateLimitConfig(rate=10)


@pytest.fixture
def small_config():
    """100 Bps with the default interval: ten bytes per slice."""
    return RateLimitConfig(rate=100)


# ============= Mock Fixtures =============


class FakeClock:
    """Fake clock whose sleep advances time instead of blocking."""

    def __init__(self, start_time: float = 0.0):
        self._time = start_time
        self.sleeps: list[float] = []

    def now(self) -> float:
        return self._time

    def advance(self, seconds: float) -> None:
        self._time += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)

    async def async_sleep(self, seconds: float) -> None:
        self.sleep(seconds)


@pytest.fixture
def fake_clock():
    """Fake clock starting at 0."""
    return FakeClock()


class RecordingSink:
    """Writable stream recording every chunk it accepts."""

    def __init__(self, accept: int | None = None):
        self._accept = accept
        self.chunks: list[bytes] = []
        self.flushed = 0

    def write(self, data) -> int:
        data = bytes(data)
        if self._accept is not None:
            data = data[: self._accept]
        self.chunks.append(data)
        return len(data)

    def flush(self) -> None:
        self.flushed += 1

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)


@pytest.fixture
def recording_sink():
    """Sink accepting everything it is given."""
    return RecordingSink()


class FailingSink(RecordingSink):
    """Sink that raises on the given call number (0-based)."""

    def __init__(self, fail_on_call: int, error: Exception | None = None):
        super().__init__()
        self.calls = 0
        self._fail_on_call = fail_on_call
        self.error = error or OSError("sink broke")

    def write(self, data) -> int:
        call = self.calls
        self.calls += 1
        if call == self._fail_on_call:
            raise self.error
        return super().write(data)


class ChunkedSource:
    """Readable stream recording the size of every request."""

    def __init__(self, data: bytes, max_chunk: int | None = None):
        self._data = data
        self._pos = 0
        self._max_chunk = max_chunk
        self.requests: list[int] = []

    def readinto(self, buffer) -> int:
        size = len(buffer)
        self.requests.append(size)
        if self._max_chunk is not None:
            size = min(size, self._max_chunk)
        chunk = self._data[self._pos : self._pos + size]
        buffer[: len(chunk)] = chunk
        self._pos += len(chunk)
        return len(chunk)


class ReadOnlySource:
    """Source exposing only ``read``, no ``readinto``."""

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0
        self.requests: list[int] = []

    def read(self, size: int) -> bytes:
        self.requests.append(size)
        chunk = self._data[self._pos : self._pos + size]
        self._pos += len(chunk)
        return chunk


class FailingSource(ChunkedSource):
    """Source that raises on the given call number (0-based)."""

    def __init__(self, data: bytes, fail_on_call: int, error: Exception | None = None):
        super().__init__(data)
        self._fail_on_call = fail_on_call
        self.error = error or OSError("source broke")

    def readinto(self, buffer) -> int:
        if len(self.requests) == self._fail_on_call:
            self.requests.append(len(buffer))
            raise self.error
        return super().readinto(buffer)


class FakeStreamWriter:
    """asyncio.StreamWriter stand-in."""

    def __init__(self, fail_on_drain: int | None = None):
        self.chunks: list[bytes] = []
        self.drains = 0
        self._fail_on_drain = fail_on_drain

    def write(self, data: bytes) -> None:
        self.chunks.append(bytes(data))

    async def drain(self) -> None:
        drain = self.drains
        self.drains += 1
        if drain == self._fail_on_drain:
            raise ConnectionResetError("peer went away")

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)


class FakeStreamReader:
    """asyncio.StreamReader stand-in."""

    def __init__(self, data: bytes, fail_on_call: int | None = None):
        self._data = data
        self._pos = 0
        self._fail_on_call = fail_on_call
        self.requests: list[int] = []

    async def read(self, n: int = -1) -> bytes:
        call = len(self.requests)
        self.requests.append(n)
        if call == self._fail_on_call:
            raise ConnectionResetError("peer went away")
        if n < 0:
            n = len(self._data) - self._pos
        chunk = self._data[self._pos : self._pos + n]
        self._pos += len(chunk)
        return chunk


# ============= Stream Factories =============


@pytest.fixture
def make_sink():
    """Factory for recording sinks."""
    return RecordingSink


@pytest.fixture
def make_failing_sink():
    """Factory for sinks that raise on a given call."""
    return FailingSink


@pytest.fixture
def make_source():
    """Factory for recording sources."""
    return ChunkedSource


@pytest.fixture
def make_read_only_source():
    """Factory for sources without readinto."""
    return ReadOnlySource


@pytest.fixture
def make_failing_source():
    """Factory for sources that raise on a given call."""
    return FailingSource


@pytest.fixture
def make_stream_writer():
    """Factory for asyncio.StreamWriter stand-ins."""
    return FakeStreamWriter


@pytest.fixture
def make_stream_reader():
    """Factory for asyncio.StreamReader stand-ins."""
    return FakeStreamReader

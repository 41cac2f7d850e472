"""asyncio rate-limited stream wrappers.

Same pacing as the blocking wrappers, with the interval wait as an
``await`` point. Cancelling the task raises ``asyncio.CancelledError``
there; setting ``cancel_event`` raises ``TransferCancelledError`` instead.
"""

import asyncio
import logging

from bytepace.domain import (
    AsyncIntervalPacer,
    AsyncReadableStream,
    AsyncWritableStream,
    RateLimitConfig,
    TransferCancelledError,
    TransferError,
)
from bytepace.domain.services import AsyncSleep

logger = logging.getLogger(__name__)


class AsyncRateLimitedWriter:
    """Wrap an ``asyncio.StreamWriter``-like sink."""

    def __init__(
        self,
        writer: AsyncWritableStream,
        config: RateLimitConfig,
        *,
        sleep: AsyncSleep | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> None:
        self._writer = writer
        self._pacer = AsyncIntervalPacer(config, sleep, cancel_event)

    @property
    def config(self) -> RateLimitConfig:
        return self._pacer.config

    @property
    def writer(self) -> AsyncWritableStream:
        return self._writer

    async def write(self, data) -> int:
        """Write all of ``data``, draining the sink after every chunk.

        Raises:
            TransferError: ``write`` or ``drain`` raised; ``transferred``
                counts the chunks drained before that.
            TransferCancelledError: The cancellation token was set.
        """
        view = memoryview(data).cast("B")
        total = view.nbytes
        pos = 0

        while pos < total:
            try:
                await self._pacer.wait(pos)
            except TransferCancelledError:
                logger.warning("Async write cancelled transferred=%d total=%d", pos, total)
                raise

            end = self._pacer.chunk_end(pos, total)
            try:
                self._writer.write(bytes(view[pos:end]))
                await self._writer.drain()
            except Exception as e:
                logger.warning("Underlying async write failed transferred=%d total=%d: %s", pos, total, e)
                raise TransferError(pos) from e
            pos = end

        logger.debug("Async write complete bytes=%d", pos)
        return pos


class AsyncRateLimitedReader:
    """Wrap an ``asyncio.StreamReader``-like source."""

    def __init__(
        self,
        reader: AsyncReadableStream,
        config: RateLimitConfig,
        *,
        sleep: AsyncSleep | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> None:
        self._reader = reader
        self._pacer = AsyncIntervalPacer(config, sleep, cancel_event)

    @property
    def config(self) -> RateLimitConfig:
        return self._pacer.config

    @property
    def reader(self) -> AsyncReadableStream:
        return self._reader

    async def readinto(self, b) -> int:
        """Fill ``b`` from the source; short only at end of stream.

        Raises:
            TransferError: The source raised; ``transferred`` counts the
                bytes already stored in ``b``.
            TransferCancelledError: The cancellation token was set.
        """
        buffer = memoryview(b).cast("B")
        total = buffer.nbytes
        pos = 0

        while pos < total:
            try:
                await self._pacer.wait(pos)
            except TransferCancelledError:
                logger.warning("Async read cancelled transferred=%d requested=%d", pos, total)
                raise

            end = self._pacer.chunk_end(pos, total)
            try:
                data = await self._reader.read(end - pos)
            except Exception as e:
                logger.warning("Underlying async read failed transferred=%d requested=%d: %s", pos, total, e)
                raise TransferError(pos) from e

            if not data:
                break
            buffer[pos : pos + len(data)] = data
            pos += len(data)

        logger.debug("Async read complete bytes=%d", pos)
        return pos

    async def read(self, n: int = -1) -> bytes:
        """Read up to ``n`` bytes, or until end of stream when ``n`` is negative."""
        if n < 0:
            return await self._read_all()

        buffer = bytearray(n)
        received = await self.readinto(buffer)
        del buffer[received:]
        return bytes(buffer)

    async def _read_all(self) -> bytes:
        chunks = bytearray()
        budget = self._pacer.config.slice_budget
        while True:
            chunk = bytearray(budget)
            try:
                received = await self.readinto(chunk)
            except TransferError as e:
                raise type(e)(len(chunks) + e.transferred) from e.__cause__
            except TransferCancelledError as e:
                raise TransferCancelledError(len(chunks) + e.transferred) from None
            chunks += chunk[:received]
            if received < budget:
                return bytes(chunks)

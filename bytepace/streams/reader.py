"""Rate-limited reader."""

import io
import logging
import threading
import time

from bytepace.domain import (
    DEFAULT_INTERVAL_MS,
    IntervalPacer,
    RateLimitConfig,
    ReadableStream,
    ReadIntoStream,
    TransferCancelledError,
    TransferError,
    parse_rate,
)
from bytepace.domain.services import Sleep

logger = logging.getLogger(__name__)


class RateLimitedReader(io.RawIOBase):
    """Readable raw stream pulling at most ``config.rate`` bytes/second from ``source``.

    ``readinto`` fills the whole buffer unless the source reaches end of
    stream, sleeping one interval before each chunk. ``read`` and
    ``readall`` come from ``io.RawIOBase``. The source is not closed when
    the wrapper is.
    """

    def __init__(
        self,
        source: ReadIntoStream | ReadableStream,
        config: RateLimitConfig,
        *,
        sleep: Sleep | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        super().__init__()
        self._source = source
        self._source_readinto = getattr(source, "readinto", None)
        self._pacer = IntervalPacer(config, sleep, cancel_event)
        logger.debug(
            "Rate-limited reader created rate=%d interval_ms=%d slice_budget=%d",
            config.rate,
            config.interval_ms,
            config.slice_budget,
        )

    @property
    def config(self) -> RateLimitConfig:
        return self._pacer.config

    @property
    def source(self) -> ReadIntoStream | ReadableStream:
        return self._source

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int | None:
        """Fill ``b`` from the source, pacing it chunk by chunk.

        Returns:
            Number of bytes read. Less than ``len(b)`` only at end of stream
            or when a non-blocking source runs dry. ``None`` if a non-blocking
            source had no data before the first byte.

        Raises:
            TransferError: The source raised; ``transferred`` counts the bytes
                already stored in ``b`` and the source error is the cause.
            TransferCancelledError: The cancellation token was set.
        """
        if self.closed:
            raise ValueError("read from closed rate-limited reader")

        buffer = memoryview(b).cast("B")
        total = buffer.nbytes
        pos = 0
        started = time.monotonic()

        while pos < total:
            try:
                self._pacer.wait(pos)
            except TransferCancelledError:
                logger.warning("Read cancelled transferred=%d requested=%d", pos, total)
                raise

            end = self._pacer.chunk_end(pos, total)
            try:
                received = self._read_chunk(buffer[pos:end])
            except Exception as e:
                logger.warning("Underlying read failed transferred=%d requested=%d: %s", pos, total, e)
                raise TransferError(pos) from e

            # Non-blocking source with nothing available yet
            if received is None:
                if pos == 0:
                    return None
                break
            if not received:
                logger.debug("End of stream transferred=%d requested=%d", pos, total)
                break
            pos += received

        logger.debug(
            "Read complete bytes=%d elapsed=%.3fs",
            pos,
            time.monotonic() - started,
        )
        return pos

    def _read_chunk(self, target: memoryview) -> int | None:
        if self._source_readinto is not None:
            return self._source_readinto(target)

        data = self._source.read(len(target))
        if data is None:
            return None
        if not data:
            return 0
        received = len(data)
        target[:received] = data
        return received


def new_reader(
    source: ReadIntoStream | ReadableStream,
    rate: int | str,
    *,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    sleep: Sleep | None = None,
    cancel_event: threading.Event | None = None,
) -> RateLimitedReader:
    """Return a reader limited to ``rate`` bytes per second.

    ``rate`` is an int or a rate string such as ``"512KBps"``.

    Raises:
        InvalidRateError: If the rate gives no budget for one interval.
    """
    config = RateLimitConfig(rate=parse_rate(rate), interval_ms=interval_ms)
    return RateLimitedReader(source, config, sleep=sleep, cancel_event=cancel_event)

"""Rate-limited writer."""

import errno
import io
import logging
import threading
import time

from bytepace.domain import (
    DEFAULT_INTERVAL_MS,
    IntervalPacer,
    RateLimitConfig,
    StalledTransferError,
    TransferCancelledError,
    TransferError,
    WritableStream,
    parse_rate,
)
from bytepace.domain.services import Sleep

logger = logging.getLogger(__name__)


class RateLimitedWriter(io.RawIOBase):
    """Writable raw stream passing at most ``config.rate`` bytes/second to ``sink``.

    Every ``write`` call sleeps one interval before each chunk, the first
    one included, and never hands the sink more than one slice budget at a
    time. The sink is not closed when the wrapper is.
    """

    def __init__(
        self,
        sink: WritableStream,
        config: RateLimitConfig,
        *,
        sleep: Sleep | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        super().__init__()
        self._sink = sink
        self._pacer = IntervalPacer(config, sleep, cancel_event)
        logger.debug(
            "Rate-limited writer created rate=%d interval_ms=%d slice_budget=%d",
            config.rate,
            config.interval_ms,
            config.slice_budget,
        )

    @property
    def config(self) -> RateLimitConfig:
        return self._pacer.config

    @property
    def sink(self) -> WritableStream:
        return self._sink

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        """Write all of ``b`` to the sink, pacing it chunk by chunk.

        Returns:
            Number of bytes written, always ``len(b)``.

        Raises:
            TransferError: The sink raised; ``transferred`` counts the bytes
                it accepted before that and the sink error is the cause.
            StalledTransferError: The sink accepted nothing, or would block.
            TransferCancelledError: The cancellation token was set.
        """
        if self.closed:
            raise ValueError("write to closed rate-limited writer")

        data = memoryview(b).cast("B")
        total = data.nbytes
        pos = 0
        started = time.monotonic()

        while pos < total:
            try:
                self._pacer.wait(pos)
            except TransferCancelledError:
                logger.warning("Write cancelled transferred=%d total=%d", pos, total)
                raise

            end = self._pacer.chunk_end(pos, total)
            try:
                sent = self._sink.write(bytes(data[pos:end]))
            except Exception as e:
                logger.warning("Underlying write failed transferred=%d total=%d: %s", pos, total, e)
                raise TransferError(pos) from e

            # None is a raw stream's "would block": nothing was written
            if sent is None:
                logger.warning("Underlying write would block transferred=%d total=%d", pos, total)
                raise StalledTransferError(pos) from BlockingIOError(
                    errno.EAGAIN, "write could not complete without blocking", 0
                )
            if sent == 0:
                raise StalledTransferError(pos)
            pos += sent

        logger.debug(
            "Write complete bytes=%d elapsed=%.3fs",
            pos,
            time.monotonic() - started,
        )
        return pos

    def flush(self) -> None:
        super().flush()
        flush = getattr(self._sink, "flush", None)
        if flush is not None and not getattr(self._sink, "closed", False):
            flush()


def new_writer(
    sink: WritableStream,
    rate: int | str,
    *,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    sleep: Sleep | None = None,
    cancel_event: threading.Event | None = None,
) -> RateLimitedWriter:
    """Return a writer limited to ``rate`` bytes per second.

    ``rate`` is an int or a rate string such as ``"2MBps"``.

    Raises:
        InvalidRateError: If the rate gives no budget for one interval.
    """
    config = RateLimitConfig(rate=parse_rate(rate), interval_ms=interval_ms)
    return RateLimitedWriter(sink, config, sleep=sleep, cancel_event=cancel_event)

"""Copy loop used by the command line."""

import logging
import time
from dataclasses import dataclass
from typing import BinaryIO, Literal

from bytepace.domain import RateLimitConfig, TransferError
from bytepace.domain.services import Sleep
from bytepace.streams import RateLimitedReader, RateLimitedWriter

logger = logging.getLogger(__name__)

Direction = Literal["write", "read"]


@dataclass(frozen=True, slots=True)
class TransferStats:
    """Outcome of a finished copy."""

    bytes_transferred: int
    elapsed: float

    @property
    def rate(self) -> float:
        """Average bytes per second."""
        if self.elapsed <= 0:
            return 0.0
        return self.bytes_transferred / self.elapsed


def copy_stream(
    source: BinaryIO,
    dest: BinaryIO,
    config: RateLimitConfig,
    direction: Direction = "write",
    buffer_size: int = 64 * 1024,
    sleep: Sleep | None = None,
) -> TransferStats:
    """Copy ``source`` to ``dest`` until end of stream, throttling one side.

    Raises:
        TransferError: The throttled side failed. ``transferred`` is the
            total copied across the whole run.
    """
    started = time.monotonic()
    copied = 0

    try:
        if direction == "write":
            writer = RateLimitedWriter(dest, config, sleep=sleep)
            while chunk := source.read(buffer_size):
                copied += writer.write(chunk)
        else:
            reader = RateLimitedReader(source, config, sleep=sleep)
            while chunk := reader.read(buffer_size):
                dest.write(chunk)
                copied += len(chunk)
    except TransferError as e:
        # Same error type and cause, counted over the whole run
        raise type(e)(copied + e.transferred) from e.__cause__

    dest.flush()
    elapsed = time.monotonic() - started
    logger.info("Copy finished bytes=%d elapsed=%.3fs direction=%s", copied, elapsed, direction)
    return TransferStats(bytes_transferred=copied, elapsed=elapsed)

"""Bandwidth-capped wrappers for byte streams.

Wrap any readable or writable stream so that it never moves more than a
fixed number of bytes per second, averaged over short time slices::

    from bytepace import MBps, new_writer

    with open("out.bin", "wb") as f:
        new_writer(f, 2 * MBps).write(payload)
"""

from ._version import __version__
from .domain import (
    Bps,
    BytepaceError,
    Gbps,
    GBps,
    InvalidRateError,
    Kbps,
    KBps,
    Mbps,
    MBps,
    RateLimitConfig,
    StalledTransferError,
    TransferCancelledError,
    TransferError,
    format_rate,
    parse_rate,
)
from .streams import (
    AsyncRateLimitedReader,
    AsyncRateLimitedWriter,
    RateLimitedReader,
    RateLimitedWriter,
    new_reader,
    new_writer,
)

__all__ = [
    "__version__",
    # Wrappers
    "RateLimitedWriter",
    "RateLimitedReader",
    "AsyncRateLimitedWriter",
    "AsyncRateLimitedReader",
    "new_writer",
    "new_reader",
    # Configuration
    "RateLimitConfig",
    "parse_rate",
    "format_rate",
    # Units
    "Bps",
    "KBps",
    "MBps",
    "GBps",
    "Kbps",
    "Mbps",
    "Gbps",
    # Errors
    "BytepaceError",
    "InvalidRateError",
    "TransferError",
    "StalledTransferError",
    "TransferCancelledError",
]

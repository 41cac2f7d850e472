"""Pure domain layer - no infrastructure dependencies."""

# Errors
from .errors import (
    BytepaceError,
    InvalidRateError,
    StalledTransferError,
    TransferCancelledError,
    TransferError,
)

# Ports
from .ports import (
    AsyncReadableStream,
    AsyncWritableStream,
    ReadableStream,
    ReadIntoStream,
    WritableStream,
)

# Services
from .services import AsyncIntervalPacer, IntervalPacer

# Value Objects
from .values import (
    DEFAULT_INTERVAL_MS,
    RATE_UNITS,
    Bps,
    Gbps,
    GBps,
    Kbps,
    KBps,
    Mbps,
    MBps,
    RateLimitConfig,
    format_rate,
    parse_rate,
)

__all__ = [
    # Values
    "RateLimitConfig",
    "DEFAULT_INTERVAL_MS",
    "Bps",
    "KBps",
    "MBps",
    "GBps",
    "Kbps",
    "Mbps",
    "Gbps",
    "RATE_UNITS",
    "parse_rate",
    "format_rate",
    # Errors
    "BytepaceError",
    "InvalidRateError",
    "TransferError",
    "StalledTransferError",
    "TransferCancelledError",
    # Services
    "IntervalPacer",
    "AsyncIntervalPacer",
    # Ports
    "WritableStream",
    "ReadableStream",
    "ReadIntoStream",
    "AsyncWritableStream",
    "AsyncReadableStream",
]

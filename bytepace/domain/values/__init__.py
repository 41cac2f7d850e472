"""Domain value objects - immutable data structures."""

from .rate import (
    RATE_UNITS,
    Bps,
    Gbps,
    GBps,
    Kbps,
    KBps,
    Mbps,
    MBps,
    format_rate,
    parse_rate,
)
from .rate_limit_config import DEFAULT_INTERVAL_MS, RateLimitConfig

__all__ = [
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
]

"""Rate-limited stream wrappers."""

from .aio import AsyncRateLimitedReader, AsyncRateLimitedWriter
from .reader import RateLimitedReader, new_reader
from .writer import RateLimitedWriter, new_writer

__all__ = [
    "RateLimitedWriter",
    "RateLimitedReader",
    "AsyncRateLimitedWriter",
    "AsyncRateLimitedReader",
    "new_writer",
    "new_reader",
]

"""Rate limit configuration value object."""

from dataclasses import dataclass

from ..errors import InvalidRateError

# Default business rules
DEFAULT_INTERVAL_MS = 100


@dataclass(frozen=True, slots=True)
class RateLimitConfig:
    """Rate limiting configuration (value object).

    ``rate`` is in bytes per second, ``interval_ms`` is the length of one
    time slice. At most ``slice_budget`` bytes cross the wrapper per slice.
    """

    rate: int
    interval_ms: int = DEFAULT_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise InvalidRateError("Interval must be positive")
        if self.rate <= 0:
            raise InvalidRateError("Rate must be positive")
        if self.slice_budget == 0:
            raise InvalidRateError(
                f"Rate {self.rate} Bps is too low for a {self.interval_ms} ms interval "
                f"(minimum is {self.min_rate} Bps)"
            )

    @property
    def slice_budget(self) -> int:
        """Maximum number of bytes per interval."""
        return int(self.rate * self.interval_ms // 1000)

    @property
    def interval(self) -> float:
        """Interval length in seconds."""
        return self.interval_ms / 1000

    @property
    def min_rate(self) -> int:
        """Lowest rate giving a budget of at least one byte per interval."""
        return -(-1000 // self.interval_ms)

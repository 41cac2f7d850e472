"""Interval pacing shared by the rate-limited readers and writers.

Transfers happen in time slices of length ``tau``. If at most
``rate * tau`` bytes cross during every slice, the transfer speed never
exceeds ``rate``. The pacer waits out one slice before each chunk and
bounds each chunk by the slice budget. Unused budget is not carried over.
"""

import asyncio
import contextlib
import threading
import time
from collections.abc import Awaitable, Callable

from ..errors import TransferCancelledError
from ..values import RateLimitConfig

Sleep = Callable[[float], None]
AsyncSleep = Callable[[float], Awaitable[None]]


class IntervalPacer:
    """Blocking pacer.

    Args:
        config: Rate and interval to enforce.
        sleep: Delay primitive. Defaults to ``time.sleep``, or to an
            interruptible wait on ``cancel_event`` when one is given.
        cancel_event: Optional cancellation token checked at every
            interval boundary.
    """

    def __init__(
        self,
        config: RateLimitConfig,
        sleep: Sleep | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self._config = config
        self._cancel_event = cancel_event
        if sleep is None:
            sleep = cancel_event.wait if cancel_event is not None else time.sleep
        self._sleep = sleep

    @property
    def config(self) -> RateLimitConfig:
        return self._config

    def chunk_end(self, pos: int, total: int) -> int:
        """End offset of the next chunk starting at ``pos``."""
        return min(pos + self._config.slice_budget, total)

    def wait(self, transferred: int) -> None:
        """Block for one interval.

        Raises:
            TransferCancelledError: If the cancellation token is set before
                or during the wait.
        """
        self._check_cancelled(transferred)
        self._sleep(self._config.interval)
        self._check_cancelled(transferred)

    def _check_cancelled(self, transferred: int) -> None:
        if self._cancel_event is not None and self._cancel_event.is_set():
            raise TransferCancelledError(transferred)


def _event_sleep(event: asyncio.Event) -> AsyncSleep:
    """Return an async sleep that ends early once ``event`` is set."""

    async def sleep(seconds: float) -> None:
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(event.wait(), seconds)

    return sleep


class AsyncIntervalPacer:
    """asyncio counterpart of IntervalPacer.

    The wait is an ordinary suspension point, so task cancellation raises
    ``asyncio.CancelledError`` there as usual.
    """

    def __init__(
        self,
        config: RateLimitConfig,
        sleep: AsyncSleep | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> None:
        self._config = config
        self._cancel_event = cancel_event
        if sleep is None:
            sleep = _event_sleep(cancel_event) if cancel_event is not None else asyncio.sleep
        self._sleep = sleep

    @property
    def config(self) -> RateLimitConfig:
        return self._config

    def chunk_end(self, pos: int, total: int) -> int:
        """End offset of the next chunk starting at ``pos``."""
        return min(pos + self._config.slice_budget, total)

    async def wait(self, transferred: int) -> None:
        """Suspend for one interval.

        Raises:
            TransferCancelledError: If the cancellation token is set before
                or during the wait.
        """
        self._check_cancelled(transferred)
        await self._sleep(self._config.interval)
        self._check_cancelled(transferred)

    def _check_cancelled(self, transferred: int) -> None:
        if self._cancel_event is not None and self._cancel_event.is_set():
            raise TransferCancelledError(transferred)

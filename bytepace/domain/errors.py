"""Domain errors."""


class BytepaceError(Exception):
    """Base class for all bytepace errors."""


class InvalidRateError(BytepaceError, ValueError):
    """Rate or interval that cannot be enforced."""


class TransferError(BytepaceError):
    """The underlying stream failed partway through a transfer.

    The underlying exception is chained as ``__cause__`` and is never
    modified. ``transferred`` is the number of bytes moved before it.
    """

    def __init__(self, transferred: int, message: str | None = None) -> None:
        self.transferred = transferred
        super().__init__(message or f"Transfer failed after {transferred} bytes")

    @property
    def error(self) -> BaseException | None:
        """The underlying exception, if any."""
        return self.__cause__


class StalledTransferError(TransferError):
    """The underlying writer accepted zero bytes without raising."""

    def __init__(self, transferred: int) -> None:
        super().__init__(
            transferred,
            f"Underlying stream accepted no data after {transferred} bytes",
        )


class TransferCancelledError(BytepaceError):
    """The cancellation token fired at an interval boundary."""

    def __init__(self, transferred: int) -> None:
        self.transferred = transferred
        super().__init__(f"Transfer cancelled after {transferred} bytes")

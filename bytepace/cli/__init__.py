"""Command line entry point."""

import logging
import sys
from contextlib import ExitStack
from typing import BinaryIO

from pydantic import ValidationError

from bytepace.config import load_config
from bytepace.domain import InvalidRateError, TransferError
from bytepace.logging_setup import setup_logging, setup_logging_from_env

from .args import parse_args
from .display import display_error, display_summary
from .transfer import TransferStats, copy_stream

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TRANSFER_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def _open_source(stack: ExitStack, path: str, throttled: bool) -> BinaryIO:
    # The throttled side skips Python's buffer so pacing reaches the descriptor
    if path == "-":
        return sys.stdin.buffer.raw if throttled else sys.stdin.buffer
    return stack.enter_context(open(path, "rb", buffering=0 if throttled else -1))


def _open_dest(stack: ExitStack, path: str, throttled: bool) -> BinaryIO:
    if path == "-":
        if not throttled:
            return sys.stdout.buffer
        sys.stdout.flush()
        return sys.stdout.buffer.raw
    return stack.enter_context(open(path, "wb", buffering=0 if throttled else -1))


def main(argv: list[str] | None = None) -> int:
    """Run the ``bytepace`` command.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValidationError, ValueError) as e:
        display_error(f"Invalid config: {e}")
        return EXIT_USAGE

    if args.verbose:
        setup_logging(logging.DEBUG)
    else:
        setup_logging_from_env(config.logging.level)

    overrides = {
        name: value
        for name, value in (("rate", args.rate), ("interval_ms", args.interval_ms))
        if value is not None
    }
    try:
        limit = config.throttle.model_copy(update=overrides).to_rate_limit_config()
    except InvalidRateError as e:
        display_error(str(e))
        return EXIT_USAGE

    logger.debug(
        "Starting copy source=%s dest=%s rate=%d interval_ms=%d direction=%s",
        args.source,
        args.dest,
        limit.rate,
        limit.interval_ms,
        args.direction,
    )

    try:
        with ExitStack() as stack:
            source = _open_source(stack, args.source, args.direction == "read")
            dest = _open_dest(stack, args.dest, args.direction == "write")
            stats: TransferStats = copy_stream(
                source,
                dest,
                limit,
                direction=args.direction,
                buffer_size=args.buffer_size,
            )
    except TransferError as e:
        display_error(str(e) if e.error is None else f"{e}: {e.error}")
        return EXIT_TRANSFER_FAILED
    except OSError as e:
        display_error(str(e))
        return EXIT_TRANSFER_FAILED
    except KeyboardInterrupt:
        display_error("Interrupted")
        return EXIT_INTERRUPTED

    if not args.quiet:
        display_summary(stats, limit)
    return EXIT_OK


__all__ = ["main"]

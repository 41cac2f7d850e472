"""Command line argument parsing."""

import argparse

from bytepace import __version__
from bytepace.domain import RATE_UNITS, InvalidRateError, parse_rate

DEFAULT_BUFFER_SIZE = 64 * 1024


def _rate(text: str) -> int:
    try:
        return parse_rate(text)
    except InvalidRateError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    units = ", ".join(RATE_UNITS)
    parser = argparse.ArgumentParser(
        prog="bytepace",
        description="Copy bytes from SOURCE to DEST at a capped rate",
        epilog=f"Rate units: {units} (B = bytes, powers of 1024; b = bits, SI)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "dest",
        nargs="?",
        default="-",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-r",
        "--rate",
        type=_rate,
        default=None,
        help="Maximum rate, e.g. 512KBps or 8Mbps (default: from config, else 1MBps)",
    )
    parser.add_argument(
        "-i",
        "--interval-ms",
        type=int,
        default=None,
        help="Length of one time slice in milliseconds (default: 100)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to YAML config (default: $BYTEPACE_CONFIG_PATH or bytepace.yaml)",
    )
    parser.add_argument(
        "--direction",
        choices=("write", "read"),
        default="write",
        help="Throttle writes to DEST or reads from SOURCE (default: write)",
    )
    parser.add_argument(
        "-b",
        "--buffer-size",
        type=int,
        default=DEFAULT_BUFFER_SIZE,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the transfer summary",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - source / dest: File paths, "-" for stdin / stdout
        - rate: Bytes per second, or None to use the config
        - interval_ms: Slice length, or None to use the config
        - config: Config file path, or None
        - direction: "write" or "read"
        - quiet / verbose: Output switches
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.buffer_size <= 0:
        parser.error("buffer size must be positive")

    return args

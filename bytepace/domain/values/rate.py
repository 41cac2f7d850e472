"""Rate units and rate string parsing.

A rate is an integer number of bytes per second. Units with a capital "B"
count bytes and use power-of-two multiples, units with a small "b" count
bits and use decimal SI multiples (converted to bytes by dividing by 8).
"""

import re

from ..errors import InvalidRateError

# Bytes, binary multiples
Bps = 1
KBps = 1024 * Bps
MBps = 1024 * KBps
GBps = 1024 * MBps

# Bits, decimal multiples
Kbps = 1000 * Bps // 8
Mbps = 1000 * Kbps
Gbps = 1000 * Mbps

RATE_UNITS: dict[str, int] = {
    "Bps": Bps,
    "KBps": KBps,
    "MBps": MBps,
    "GBps": GBps,
    "Kbps": Kbps,
    "Mbps": Mbps,
    "Gbps": Gbps,
}

_RATE_PATTERN = re.compile(r"^\s*(?P<value>\d+(?:\.\d+)?)\s*(?P<unit>[A-Za-z]*)\s*$")

# Largest first, used for display
_DISPLAY_UNITS = (("GBps", GBps), ("MBps", MBps), ("KBps", KBps))


def parse_rate(text: str | int) -> int:
    """Parse a rate such as ``"512"``, ``"64KBps"`` or ``"8 Mbps"``.

    Args:
        text: Number with an optional unit suffix, or a plain int.

    Returns:
        Rate in bytes per second. Fractional results are truncated.

    Raises:
        InvalidRateError: If the text is malformed or the unit is unknown.
    """
    if isinstance(text, bool):
        raise InvalidRateError(f"Invalid rate: {text!r}")
    if isinstance(text, int):
        return text

    match = _RATE_PATTERN.match(text)
    if match is None:
        raise InvalidRateError(f"Invalid rate: {text!r}")

    unit_name = match.group("unit") or "Bps"
    unit = RATE_UNITS.get(unit_name)
    if unit is None:
        known = ", ".join(RATE_UNITS)
        raise InvalidRateError(f"Unknown rate unit {unit_name!r} (expected one of: {known})")

    value = match.group("value")
    if "." in value:
        return int(float(value) * unit)
    return int(value) * unit


def format_rate(rate: float) -> str:
    """Render a byte rate using the largest fitting binary unit."""
    for name, unit in _DISPLAY_UNITS:
        if rate >= unit:
            return f"{rate / unit:.1f} {name}"
    return f"{rate:.0f} Bps"

# benchvault/utils/units.py
"""
Rate normalization for iperf3 style throughput labels.
"""

import re
from typing import Any


RATE_RE = re.compile(r'(\d+(?:\.\d*)?|\.\d+)\s*([GMK])?(?:bits|Bytes)/sec', re.IGNORECASE)

SCALE_TO_MBPS = {
    'G': 1000.0,
    'M': 1.0,
    'K': 0.001,
    '': 1.0
}


def to_mbps(value: Any) -> float:
    """
    Convert a rate label such as "9.41 Gbits/sec" to megabits per second.

    Args:
        value: Rate label; anything else is accepted and yields 0

    Returns:
        Rate in Mbps, or 0 when the label carries no recognizable rate
    """
    if not isinstance(value, str) or not value:
        return 0.0

    match = RATE_RE.search(value)
    if not match:
        return 0.0

    number = float(match.group(1))
    scale = (match.group(2) or '').upper()
    return number * SCALE_TO_MBPS[scale]

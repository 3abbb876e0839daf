"""Frequency range parsing and display formatting.

Band descriptors are free text such as ``"14.0 - 14.35 MHz"`` or
``"2.4 - 2.5 GHz"``. Point-frequency queries use integer kHz.
"""

from __future__ import annotations

import re
from typing import Optional

from bandscope.models.band import FrequencyRange

# Query domain in kHz: 0 Hz to 3 GHz inclusive
MIN_FREQUENCY_KHZ = 0
MAX_FREQUENCY_KHZ = 3_000_000

# Tried in order, first match wins. Each maps to a multiplier into MHz.
_RANGE_PATTERNS = (
    (re.compile(r"(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)\s*MHz", re.IGNORECASE), 1),
    (re.compile(r"(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)\s*GHz", re.IGNORECASE), 1000),
)


def parse_range(descriptor: Optional[str]) -> Optional[FrequencyRange]:
    """Parse a band descriptor into a range in MHz.

    Returns ``None`` when the descriptor matches no known pattern. Bounds
    are not reordered: an inverted range is returned as is and never
    contains any frequency.
    """
    if not descriptor:
        return None

    for pattern, multiplier in _RANGE_PATTERNS:
        match = pattern.search(descriptor)
        if match:
            return FrequencyRange(
                minFrequency=float(match.group(1)) * multiplier,
                maxFrequency=float(match.group(2)) * multiplier,
            )
    return None


def khz_to_mhz(freq_khz: int) -> float:
    return freq_khz / 1000


def is_valid_frequency(freq_khz: object) -> bool:
    """Return True if *freq_khz* is a selectable point frequency."""
    if isinstance(freq_khz, bool) or not isinstance(freq_khz, int):
        return False
    return MIN_FREQUENCY_KHZ <= freq_khz <= MAX_FREQUENCY_KHZ


def format_frequency(freq_khz: int) -> str:
    """Return a human-friendly frequency string.

    >>> format_frequency(14_000)
    '14.000 MHz'
    >>> format_frequency(2_450_000)
    '2.450 GHz'
    >>> format_frequency(500)
    '500 kHz'
    """
    if freq_khz >= 1_000_000:
        return f"{freq_khz / 1_000_000:.3f} GHz"
    if freq_khz >= 1_000:
        return f"{freq_khz / 1_000:.3f} MHz"
    return f"{freq_khz} kHz"

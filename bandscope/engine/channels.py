"""Channel numbers for channelized allocations (CB, PMR446, LPD)."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Tuple

from bandscope.models.band import Band

from .ranges import khz_to_mhz


class ChannelPlan(NamedTuple):
    name: str  # Prefix of the channel label
    band: str  # Exact band identifier the plan applies to
    start: float  # Channel 1, MHz
    step: float  # Channel spacing, MHz
    channels: int  # Highest channel number
    guard: Optional[Tuple[float, float]] = None  # Extra MHz range check


CHANNEL_PLANS: Tuple[ChannelPlan, ...] = (
    ChannelPlan("CB", "11m CB", 26.965, 0.010, 40),
    ChannelPlan("PMR446", "PMR446", 446.00625, 0.0125, 16),
    ChannelPlan("LPD", "70cm ISM", 433.075, 0.025, 69, guard=(433.075, 434.775)),
)


def _round_half_up(value: float) -> int:
    # Halves round up, unlike round()
    return math.floor(value + 0.5)


def find_plan(freq_khz: int, band: Band) -> Optional[ChannelPlan]:
    """Return the channel plan covering *band* at *freq_khz*, if any."""
    mhz = khz_to_mhz(freq_khz)
    for plan in CHANNEL_PLANS:
        if band.band != plan.band:
            continue
        if plan.guard and not plan.guard[0] <= mhz <= plan.guard[1]:
            continue
        return plan
    return None


def channel_number(freq_khz: int, band: Band) -> Optional[int]:
    """Return the channel number at *freq_khz*, or None off-plan."""
    plan = find_plan(freq_khz, band)
    if plan is None:
        return None

    number = _round_half_up((khz_to_mhz(freq_khz) - plan.start) / plan.step) + 1
    if 1 <= number <= plan.channels:
        return number
    return None


def channel_for(freq_khz: int, band: Band) -> Optional[str]:
    """Return a channel label such as ``"PMR446 channel 3"``."""
    number = channel_number(freq_khz, band)
    if number is None:
        return None
    plan = find_plan(freq_khz, band)
    return f"{plan.name} channel {number}"

"""Point-frequency resolution of bands and segments."""

from __future__ import annotations

from typing import Iterable, List, Optional

from bandscope.models.band import Band
from bandscope.models.lookup import SegmentModes

from .ranges import is_valid_frequency, khz_to_mhz, parse_range


def band_contains(band: Band, freq_khz: int) -> bool:
    """Return True if the band's descriptor range contains *freq_khz*."""
    freq_range = parse_range(band.frequency)
    if freq_range is None:
        return False
    return freq_range.contains(khz_to_mhz(freq_khz))


def resolve(freq_khz: int, bands: Iterable[Band]) -> List[Band]:
    """Return every band containing *freq_khz*, in dataset order.

    Bands with an unparseable descriptor are skipped. Overlapping
    allocations are all returned; there is no notion of a primary band.
    """
    return [band for band in bands if band_contains(band, freq_khz)]


def scope_bands(freq_khz: Optional[int], bands: Iterable[Band]) -> List[Band]:
    """Frequency-scoped subset, or every band when nothing is selected.

    A frequency outside the query domain counts as no selection.
    """
    if freq_khz is None or not is_valid_frequency(freq_khz):
        return list(bands)
    return resolve(freq_khz, bands)


def resolve_segment(freq_khz: int, band: Band) -> SegmentModes:
    """Return the modes active at *freq_khz* within *band*.

    The first segment (in declaration order) containing the frequency
    wins. Without a match the band-level modes apply, with no note.
    """
    for segment in band.segments or []:
        if segment.contains(freq_khz):
            return SegmentModes(modes=list(segment.modes), note=segment.note)
    return SegmentModes(modes=list(band.modes or []))

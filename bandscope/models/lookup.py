"""Pydantic models for facts derived from the band dataset.

None of these are stored: every query recomputes them from the immutable
band records.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from .band import Band


class Permission(str, Enum):
    """Whether a band may be transmitted on."""

    FORBIDDEN = "forbidden"
    ALLOWED = "allowed"
    LICENSE_REQUIRED = "license_required"
    UNKNOWN = "unknown"


class Verdict(BaseModel):
    """Transmission permission for a band, with a human-readable reason."""

    permission: Permission
    label: str  # Short label keyed off permission
    icon: str  # Icon keyed off permission
    reason: str


class SegmentModes(BaseModel):
    """Modes active at a frequency inside a band."""

    modes: List[str] = []
    note: Optional[str] = None


class FilterCriteria(BaseModel):
    """Compound band filter. Empty criteria do not constrain."""

    bandName: Optional[str] = None  # Exact band name, case-insensitive
    usage: Optional[str] = None  # Exact usage category, case-insensitive
    country: Optional[str] = None  # Country code membership
    searchText: Optional[str] = None  # Substring over the searchable text


class BandDetail(BaseModel):
    """A band together with the facts derived for the current query."""

    band: Band
    verdict: Verdict
    modes: List[str]  # Segment modes at the frequency, else band modes
    segmentNote: Optional[str] = None
    channel: Optional[str] = None  # e.g. "PMR446 channel 3"


class BandStats(BaseModel):
    """Counters shown alongside a band listing."""

    total: int
    amateur: int  # usage == radioamatoriale
    free: int  # usage == libero


class BandSearchResult(BaseModel):
    """Results from a scoped and filtered band query."""

    query: dict  # The search parameters used
    frequency: Optional[int] = None  # Selected frequency in kHz, if any
    frequencyDisplay: Optional[str] = None
    count: int
    stats: BandStats
    bands: List[BandDetail]


class FilterOptions(BaseModel):
    """Distinct values available for each filter."""

    bands: List[str]
    usages: List[str]
    countries: List[str]


class BandPlanSummary(BaseModel):
    """Summary information about the loaded dataset."""

    version: str
    source: str
    totalBands: int
    unparseableBands: int  # Bands excluded from frequency resolution
    stats: BandStats
    frequencyRange: dict  # {"min": MHz, "max": MHz}

"""Model exports."""

from .band import Band, FrequencyRange, Segment
from .lookup import (
    BandDetail,
    BandPlanSummary,
    BandSearchResult,
    BandStats,
    FilterCriteria,
    FilterOptions,
    Permission,
    SegmentModes,
    Verdict,
)

__all__ = [
    "Band",
    "Segment",
    "FrequencyRange",
    "Permission",
    "Verdict",
    "SegmentModes",
    "FilterCriteria",
    "BandDetail",
    "BandStats",
    "BandSearchResult",
    "FilterOptions",
    "BandPlanSummary",
]

"""Band plan adapter: loads the band dataset and answers queries over it.

The dataset is read once at construction time and never modified. Every
query re-derives its results from the full dataset through the engine.
"""

from __future__ import annotations

import json
import os
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from bandscope.engine import (
    apply_filters,
    channel_for,
    classify,
    format_frequency,
    is_valid_frequency,
    parse_range,
    resolve_segment,
    scope_bands,
)
from bandscope.engine.ranges import khz_to_mhz
from bandscope.middleware.logging import log_error, log_info, log_warning
from bandscope.models import (
    Band,
    BandDetail,
    BandPlanSummary,
    BandSearchResult,
    BandStats,
    FilterCriteria,
    FilterOptions,
)


def compute_stats(bands: Iterable[Band]) -> BandStats:
    """Count all, amateur and free bands in *bands*."""
    total = amateur = free = 0
    for band in bands:
        total += 1
        usage = band.usage.lower()
        if usage == "radioamatoriale":
            amateur += 1
        elif usage == "libero":
            free += 1
    return BandStats(total=total, amateur=amateur, free=free)


def find_defects(bands: Iterable[Band]) -> List[Dict[str, Any]]:
    """Report data problems that keep bands or segments from matching.

    Each defect is a dict with ``index``, ``band``, ``problem`` and, for
    segment problems, ``segment``. Problems are ``unparseable``,
    ``inverted``, ``segment_inverted`` and ``segment_outside``.
    """
    defects = []
    for index, band in enumerate(bands):
        freq_range = parse_range(band.frequency)
        if freq_range is None:
            defects.append({"index": index, "band": band.band, "problem": "unparseable"})
        elif freq_range.inverted:
            defects.append({"index": index, "band": band.band, "problem": "inverted"})

        for seg_index, segment in enumerate(band.segments or []):
            defect = {"index": index, "band": band.band, "segment": seg_index}
            if segment.start > segment.end:
                defects.append({**defect, "problem": "segment_inverted"})
            elif (
                freq_range is not None
                and not freq_range.inverted
                and not (
                    freq_range.contains(khz_to_mhz(segment.start))
                    and freq_range.contains(khz_to_mhz(segment.end))
                )
            ):
                defects.append({**defect, "problem": "segment_outside"})
    return defects


class BandPlanAdapter:
    """Adapter for querying the band dataset."""

    def __init__(self, data_file: Optional[str] = None):
        """Initialize the adapter and load the dataset.

        Args:
            data_file: Path to a dataset JSON file. Defaults to the
                ``BANDSCOPE_DATA_FILE`` environment variable, then to the
                packaged dataset.
        """
        self.data_file = data_file or os.getenv("BANDSCOPE_DATA_FILE")
        self.version = "unknown"
        self.source = "unknown"
        self.bands: List[Band] = []
        self._load_bands()

    def _read_data(self) -> Optional[str]:
        if not self.data_file:
            return resources.files("bandscope").joinpath("data/bands.json").read_text(
                encoding="utf-8"
            )

        path = Path(self.data_file)
        if not path.exists():
            log_error(
                "bands_data_missing",
                message=f"Band data file not found at {path}",
            )
            return None
        return path.read_text(encoding="utf-8")

    def _load_bands(self) -> None:
        """Load the dataset; any failure leaves an empty dataset."""
        try:
            text = self._read_data()
            if text is None:
                return
            data = json.loads(text)
        except (OSError, ValueError) as e:
            log_error("bands_load_error", error=str(e))
            return

        if isinstance(data, dict):
            self.version = str(data.get("version", "unknown"))
            self.source = str(data.get("source", "unknown"))
            records = data.get("bands", [])
        else:
            records = data

        if not isinstance(records, list):
            log_error("bands_load_error", error="expected a list of band records")
            return

        bands = []
        for index, record in enumerate(records):
            try:
                bands.append(Band.model_validate(record))
            except ValidationError as e:
                log_warning("band_record_invalid", index=index, error=str(e))
        self.bands = bands

        for defect in find_defects(self.bands):
            problem = defect.pop("problem")
            if problem == "unparseable":
                log_warning("band_range_unparseable", **defect)
            elif problem == "inverted":
                log_warning("band_range_inverted", **defect)
            elif problem == "segment_inverted":
                log_warning("band_segment_inverted", **defect)
            else:
                log_warning("band_segment_outside", **defect)

        log_info(
            "bands_loaded",
            bands=len(self.bands),
            version=self.version,
            source=self.source,
        )

    def describe(self, band: Band, frequency: Optional[int] = None) -> BandDetail:
        """Expand *band* with its verdict and, at a frequency, channel and modes."""
        if frequency is None:
            return BandDetail(
                band=band,
                verdict=classify(band),
                modes=list(band.modes or []),
            )

        active = resolve_segment(frequency, band)
        return BandDetail(
            band=band,
            verdict=classify(band),
            modes=active.modes,
            segmentNote=active.note,
            channel=channel_for(frequency, band),
        )

    def search(
        self,
        frequency: Optional[int] = None,
        criteria: Optional[FilterCriteria] = None,
    ) -> BandSearchResult:
        """Scope the dataset to *frequency*, then apply *criteria*.

        Args:
            frequency: Point frequency in kHz. ``None`` or a value outside
                0..3,000,000 selects nothing and searches the whole dataset.
            criteria: Optional filter criteria applied on top of the scope.

        Returns:
            BandSearchResult with one BandDetail per matching band
        """
        selected = frequency if is_valid_frequency(frequency) else None
        matches = apply_filters(scope_bands(selected, self.bands), criteria)

        query: Dict[str, Any] = {"frequency": frequency}
        if criteria is not None:
            query.update(criteria.model_dump())

        return BandSearchResult(
            query={k: v for k, v in query.items() if v not in (None, "")},
            frequency=selected,
            frequencyDisplay=format_frequency(selected) if selected is not None else None,
            count=len(matches),
            stats=compute_stats(matches),
            bands=[self.describe(band, selected) for band in matches],
        )

    def lookup_frequency(self, frequency: int) -> BandSearchResult:
        """Everything known about a single point frequency (kHz)."""
        return self.search(frequency=frequency)

    def get_filter_options(self) -> FilterOptions:
        """Collect the distinct values offered by each filter."""
        band_names = set()
        usages = set()
        countries = set()

        for band in self.bands:
            band_names.add(band.band)
            if band.usage:
                usages.add(band.usage.lower())
            for country in band.countries or []:
                countries.add(country.upper())

        return FilterOptions(
            bands=sorted(band_names),
            usages=sorted(usages),
            countries=sorted(countries),
        )

    def get_summary(self) -> Optional[BandPlanSummary]:
        """Get summary information about the loaded dataset."""
        if not self.bands:
            return None

        ranges = [parse_range(band.frequency) for band in self.bands]
        parsed = [r for r in ranges if r is not None and not r.inverted]

        return BandPlanSummary(
            version=self.version,
            source=self.source,
            totalBands=len(self.bands),
            unparseableBands=sum(1 for r in ranges if r is None),
            stats=compute_stats(self.bands),
            frequencyRange={
                "min": min((r.minFrequency for r in parsed), default=None),
                "max": max((r.maxFrequency for r in parsed), default=None),
            },
        )


# Create a singleton instance
_bandplan_adapter = None


def get_bandplan_adapter() -> BandPlanAdapter:
    """Get the singleton band plan adapter instance."""
    global _bandplan_adapter
    if _bandplan_adapter is None:
        _bandplan_adapter = BandPlanAdapter()
    return _bandplan_adapter

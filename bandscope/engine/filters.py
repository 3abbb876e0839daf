"""Compound predicate filters over a band collection."""

from __future__ import annotations

from typing import Iterable, List, Optional

from bandscope.models.band import Band
from bandscope.models.lookup import FilterCriteria


def searchable_text(band: Band) -> str:
    """Text matched by free-text search, lower-cased."""
    return " ".join([band.frequency, band.assignment, band.band, band.usage]).lower()


def _matches(band: Band, criteria: FilterCriteria) -> bool:
    if criteria.bandName and band.band.lower() != criteria.bandName.lower():
        return False

    if criteria.usage and band.usage.lower() != criteria.usage.lower():
        return False

    if criteria.country:
        country = criteria.country.lower()
        if not any(c.lower() == country for c in band.countries or []):
            return False

    if criteria.searchText and criteria.searchText.lower() not in searchable_text(band):
        return False

    return True


def apply_filters(
    bands: Iterable[Band], criteria: Optional[FilterCriteria] = None
) -> List[Band]:
    """Return the bands matching every non-empty criterion, order preserved."""
    if criteria is None:
        return list(bands)
    return [band for band in bands if _matches(band, criteria)]

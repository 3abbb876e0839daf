"""Pydantic models for band records.

A band is one entry of the spectrum dataset: a named allocation with an
overall frequency range (as text), regulatory attributes and optional
sub-segments carrying their own mode restrictions. Records are loaded once
and never modified, so the models are frozen.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class FrequencyRange(BaseModel):
    """Numeric band range parsed from a descriptor, in MHz."""

    model_config = ConfigDict(frozen=True)

    minFrequency: float  # MHz
    maxFrequency: float  # MHz

    @property
    def inverted(self) -> bool:
        return self.minFrequency > self.maxFrequency

    def contains(self, mhz: float) -> bool:
        """Inclusive containment; an inverted range contains nothing."""
        return self.minFrequency <= mhz <= self.maxFrequency


class Segment(BaseModel):
    """A sub-range of a band that overrides the band-level modes."""

    model_config = ConfigDict(frozen=True)

    start: float  # kHz
    end: float  # kHz
    modes: List[str] = []
    note: Optional[str] = None

    def contains(self, khz: float) -> bool:
        return self.start <= khz <= self.end


class Band(BaseModel):
    """A spectrum allocation as supplied by the dataset."""

    model_config = ConfigDict(frozen=True)

    band: str  # e.g. "20m", "PMR446", "11m CB"
    frequency: str  # e.g. "14.0 - 14.35 MHz", "2.4 - 2.5 GHz"
    assignment: str = ""  # Free-text description
    usage: str = ""  # libero, radioamatoriale, licenziato, riservato, ...
    transmission: bool = False  # Whether transmitting is permitted at all
    power: Optional[str] = None  # Maximum power, opaque
    modes: Optional[List[str]] = None  # Default modes for the whole band
    segments: Optional[List[Segment]] = None
    countries: Optional[List[str]] = None  # Two-letter country codes
    notes: Optional[str] = None

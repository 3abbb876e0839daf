"""Adapter exports."""

from .bandplan import BandPlanAdapter, compute_stats, find_defects, get_bandplan_adapter

__all__ = [
    "BandPlanAdapter",
    "compute_stats",
    "find_defects",
    "get_bandplan_adapter",
]

"""Frequency resolution and regulatory classification engine."""

from .channels import CHANNEL_PLANS, channel_for, channel_number
from .classifier import classify
from .filters import apply_filters, searchable_text
from .ranges import format_frequency, is_valid_frequency, parse_range
from .resolver import resolve, resolve_segment, scope_bands

__all__ = [
    "parse_range",
    "format_frequency",
    "is_valid_frequency",
    "CHANNEL_PLANS",
    "channel_number",
    "channel_for",
    "classify",
    "resolve",
    "resolve_segment",
    "scope_bands",
    "apply_filters",
    "searchable_text",
]

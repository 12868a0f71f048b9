"""Diff, presentation and schedule services."""

from banzuke_delta.services.basho_schedule import build_basho_schedule
from banzuke_delta.services.diff_engine import compute_diff, format_delta
from banzuke_delta.services.presentation import build_presentation, month_year_from_id

__all__ = [
    "build_basho_schedule",
    "build_presentation",
    "compute_diff",
    "format_delta",
    "month_year_from_id",
]

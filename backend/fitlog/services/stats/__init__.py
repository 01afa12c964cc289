"""
Stats module - Aggregation engine behind /api/stats.

This module provides:
- Calendar window generation for the trailing series
- Totals, per-type and daily aggregations
- Snapshot fetch and malformed-date policy
- Chart geometry for the trailing-week bar chart
"""
from fitlog.services.stats.aggregator import (
    build_stats_report,
    compute_totals,
    compute_type_breakdown,
    daily_minutes,
    reconcile_daily_series,
)
from fitlog.services.stats.chart import chart_bars, chart_scale
from fitlog.services.stats.snapshot import fetch_snapshot, prepare_snapshot
from fitlog.services.stats.types import (
    DailySeriesPoint,
    StatsReport,
    TotalsSummary,
    TypeBreakdownEntry,
    WorkoutEntry,
)
from fitlog.services.stats.window import DEFAULT_WINDOW_DAYS, calendar_window

__all__ = [
    # Data structures
    "WorkoutEntry",
    "TotalsSummary",
    "TypeBreakdownEntry",
    "DailySeriesPoint",
    "StatsReport",
    # Window
    "DEFAULT_WINDOW_DAYS",
    "calendar_window",
    # Aggregations
    "compute_totals",
    "compute_type_breakdown",
    "daily_minutes",
    "reconcile_daily_series",
    "build_stats_report",
    # Snapshot
    "fetch_snapshot",
    "prepare_snapshot",
    # Chart
    "chart_scale",
    "chart_bars",
]

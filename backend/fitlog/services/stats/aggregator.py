"""
Stats Aggregator - Turns a workout snapshot into summary statistics.

Provides:
- Lifetime totals
- Per-activity-type breakdown
- Dense daily minutes series over a trailing calendar window

Every function here is pure: it reads the entries it is given and
returns new values.
"""
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Sequence

from fitlog.services.stats.types import (
    DailySeriesPoint,
    StatsReport,
    TotalsSummary,
    TypeBreakdownEntry,
    WorkoutEntry,
)
from fitlog.services.stats.window import DEFAULT_WINDOW_DAYS, calendar_window


def compute_totals(entries: Iterable[WorkoutEntry]) -> TotalsSummary:
    """Count records and sum their minutes and calories."""
    count = 0
    total_minutes = 0
    total_calories = 0
    
    for entry in entries:
        count += 1
        total_minutes += entry.duration_minutes or 0
        total_calories += entry.calories or 0
    
    return TotalsSummary(
        count=count,
        total_minutes=total_minutes,
        total_calories=total_calories,
    )


def compute_type_breakdown(entries: Iterable[WorkoutEntry]) -> List[TypeBreakdownEntry]:
    """
    Group entries by exact type label.
    
    Only labels that occur in the snapshot are emitted. The result is
    sorted by label so repeated calls serialize identically; callers
    should still treat it as a set keyed by `type`.
    """
    counts: Dict[str, int] = defaultdict(int)
    minutes: Dict[str, int] = defaultdict(int)
    
    for entry in entries:
        counts[entry.type] += 1
        minutes[entry.type] += entry.duration_minutes or 0
    
    return [
        TypeBreakdownEntry(type=label, count=counts[label], minutes=minutes[label])
        for label in sorted(counts)
    ]


def daily_minutes(entries: Iterable[WorkoutEntry]) -> Dict[str, int]:
    """Sum minutes per exact date string (sparse: only dates with records)."""
    totals: Dict[str, int] = defaultdict(int)
    for entry in entries:
        totals[entry.date] += entry.duration_minutes or 0
    return dict(totals)


def reconcile_daily_series(
    window: Sequence[date],
    minutes_by_date: Dict[str, int],
) -> List[DailySeriesPoint]:
    """
    Left-join the calendar window against the sparse per-date minutes.
    
    The window decides which dates appear and in what order: days with
    no records get 0 and accumulator dates outside the window are dropped.
    
    Args:
        window: Ascending, gap-free dates (see calendar_window)
        minutes_by_date: ISO date string -> summed minutes
        
    Returns:
        One point per window date, in window order
    """
    series = []
    for day in window:
        key = day.isoformat()
        series.append(DailySeriesPoint(date=key, minutes=minutes_by_date.get(key, 0)))
    return series


def build_stats_report(
    entries: Sequence[WorkoutEntry],
    reference_date: date,
    days: int = DEFAULT_WINDOW_DAYS,
) -> StatsReport:
    """
    Run all three aggregations over one snapshot.
    
    Args:
        entries: Snapshot of validated workout entries
        reference_date: Last day of the daily series
        days: Length of the daily series
        
    Returns:
        StatsReport ready for serialization
    """
    window = calendar_window(reference_date, days)
    
    return StatsReport(
        totals=compute_totals(entries),
        by_type=compute_type_breakdown(entries),
        daily=reconcile_daily_series(window, daily_minutes(entries)),
    )

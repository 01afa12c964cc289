"""
Chart geometry for the trailing-week bar chart.

The renderer draws bars from these values; it never reads records.
"""
from typing import Any, Dict, List, Sequence

from fitlog.services.stats.types import DailySeriesPoint

# Lowest y-axis maximum, keeps near-empty weeks from filling the chart
MIN_Y_MAX = 60


def chart_scale(points: Sequence[DailySeriesPoint], floor: int = MIN_Y_MAX) -> int:
    """Y-axis maximum: the largest daily value, never below `floor`."""
    if floor < 1:
        raise ValueError(f"Chart floor must be at least 1, got {floor}")
    return max([floor] + [point.minutes for point in points])


def chart_label(iso_date: str) -> str:
    """2024-06-01 -> 06/01"""
    return iso_date[5:].replace("-", "/")


def chart_bars(points: Sequence[DailySeriesPoint], floor: int = MIN_Y_MAX) -> Dict[str, Any]:
    """
    Bar geometry for a daily series.
    
    Returns:
        Dict with yMax and one bar per point; height is minutes / yMax
    """
    y_max = chart_scale(points, floor)
    bars: List[Dict[str, Any]] = [
        {
            "date": point.date,
            "label": chart_label(point.date),
            "minutes": point.minutes,
            "height": round(point.minutes / y_max, 4),
        }
        for point in points
    ]
    return {"yMax": y_max, "bars": bars}

from fitlog.schemas.stats import (
    ChartBar,
    ChartResponse,
    DailyPoint,
    StatsResponse,
    StatsTotals,
    TypeBreakdownItem,
)
from fitlog.schemas.workout import WorkoutRequest, WorkoutResponse

__all__ = [
    "ChartBar",
    "ChartResponse",
    "DailyPoint",
    "StatsResponse",
    "StatsTotals",
    "TypeBreakdownItem",
    "WorkoutRequest",
    "WorkoutResponse",
]

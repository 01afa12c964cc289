"""
Value types consumed and produced by the stats engine.

All derived values are created per request and never persisted.
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class WorkoutEntry:
    """Read-only view of one stored workout, as seen by the aggregations."""
    id: Optional[int]
    date: str  # YYYY-MM-DD, no time component
    type: str
    duration_minutes: int
    calories: int = 0
    notes: str = ""


@dataclass(frozen=True)
class TotalsSummary:
    """Lifetime count, duration and calorie sums."""
    count: int = 0
    total_minutes: int = 0
    total_calories: int = 0
    
    def to_dict(self) -> Dict[str, int]:
        """Convert to the public camelCase shape."""
        return {
            "totalWorkouts": self.count,
            "totalMinutes": self.total_minutes,
            "totalCalories": self.total_calories,
        }


@dataclass(frozen=True)
class TypeBreakdownEntry:
    """Aggregate for one activity label."""
    type: str
    count: int
    minutes: int
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DailySeriesPoint:
    """Minutes recorded on one calendar day of the reporting window."""
    date: str
    minutes: int = 0
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class StatsReport:
    """
    Everything the stats endpoint returns.
    
    `by_type` is keyed by label; its order carries no meaning.
    """
    totals: TotalsSummary
    by_type: List[TypeBreakdownEntry] = field(default_factory=list)
    daily: List[DailySeriesPoint] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the response shape served at /api/stats."""
        return {
            "totals": self.totals.to_dict(),
            "byType": [entry.to_dict() for entry in self.by_type],
            "last7": [point.to_dict() for point in self.daily],
        }

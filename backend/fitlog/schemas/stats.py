"""
Response schemas for the stats endpoints.

Field names are part of the public contract and stay camelCase.
"""
from pydantic import BaseModel


class StatsTotals(BaseModel):
    totalWorkouts: int
    totalMinutes: int
    totalCalories: int


class TypeBreakdownItem(BaseModel):
    type: str
    count: int
    minutes: int


class DailyPoint(BaseModel):
    date: str
    minutes: int


class StatsResponse(BaseModel):
    """Lifetime totals, per-type breakdown and the trailing-week series."""
    totals: StatsTotals
    byType: list[TypeBreakdownItem]
    last7: list[DailyPoint]


class ChartBar(BaseModel):
    date: str
    label: str
    minutes: int
    height: float


class ChartResponse(BaseModel):
    """Bar geometry for the trailing-week chart, heights relative to yMax."""
    yMax: int
    bars: list[ChartBar]

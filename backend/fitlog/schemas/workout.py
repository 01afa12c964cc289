"""
Request/response schemas for workout records.
"""
from datetime import date as date_type

from pydantic import BaseModel, Field


class WorkoutRequest(BaseModel):
    """Body for creating or replacing a workout."""
    date: date_type = Field(..., description="Calendar date, YYYY-MM-DD")
    type: str = Field(..., min_length=1, max_length=50, description="Activity label")
    duration: int = Field(..., ge=1, description="Duration in minutes")
    calories: int | None = Field(0, ge=0, description="Calories burned")
    notes: str | None = Field("", description="Free text")


class WorkoutResponse(BaseModel):
    """Workout record response."""
    id: int
    date: str
    type: str
    duration: int
    calories: int
    notes: str

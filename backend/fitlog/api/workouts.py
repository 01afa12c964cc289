"""
Workout records API endpoints.
"""
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitlog.core.database import get_db
from fitlog.core.exceptions import WorkoutNotFoundError
from fitlog.core.logging import get_logger
from fitlog.models.workout import Workout
from fitlog.schemas.workout import WorkoutRequest, WorkoutResponse

logger = get_logger(__name__)
router = APIRouter()


async def _get_workout(db: AsyncSession, workout_id: int) -> Workout:
    result = await db.execute(select(Workout).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if not workout:
        raise WorkoutNotFoundError(workout_id)
    return workout


def _apply(workout: Workout, request: WorkoutRequest) -> None:
    workout.date = request.date.isoformat()
    workout.type = request.type
    workout.duration = request.duration
    workout.calories = request.calories or 0
    workout.notes = request.notes or ""


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=list[WorkoutResponse])
async def list_workouts(
    workout_type: str | None = Query(None, alias="type", description="Activity label, 'All' for any"),
    date_from: date | None = Query(None, alias="from", description="Earliest date, inclusive"),
    date_to: date | None = Query(None, alias="to", description="Latest date, inclusive"),
    db: AsyncSession = Depends(get_db),
):
    """
    List workouts, newest first, optionally filtered.
    """
    stmt = select(Workout)
    if workout_type and workout_type != "All":
        stmt = stmt.where(Workout.type == workout_type)
    if date_from:
        stmt = stmt.where(Workout.date >= date_from.isoformat())
    if date_to:
        stmt = stmt.where(Workout.date <= date_to.isoformat())
    
    result = await db.execute(stmt.order_by(Workout.date.desc(), Workout.id.desc()))
    return [workout.to_dict() for workout in result.scalars().all()]


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
async def create_workout(
    request: WorkoutRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Log a new workout.
    """
    workout = Workout()
    _apply(workout, request)
    db.add(workout)
    await db.flush()
    await db.refresh(workout)
    
    logger.info("Workout created", workout_id=workout.id, type=workout.type)
    
    return workout.to_dict()


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific workout by ID.
    """
    workout = await _get_workout(db, workout_id)
    return workout.to_dict()


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: int,
    request: WorkoutRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace the editable fields of a workout.
    """
    workout = await _get_workout(db, workout_id)
    _apply(workout, request)
    await db.flush()
    await db.refresh(workout)
    
    logger.info("Workout updated", workout_id=workout_id)
    
    return workout.to_dict()


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a workout.
    """
    workout = await _get_workout(db, workout_id)
    await db.delete(workout)
    
    logger.info("Workout deleted", workout_id=workout_id)
    
    return {"ok": True}

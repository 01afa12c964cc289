"""
Snapshot Store - Reads the workout snapshot the aggregations run over.
"""
import re
from datetime import date
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fitlog.core.exceptions import MalformedRecordError, SnapshotUnavailableError
from fitlog.core.logging import get_logger
from fitlog.models.workout import Workout
from fitlog.services.stats.types import WorkoutEntry

logger = get_logger(__name__)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_calendar_date(value: object) -> bool:
    """True if value is a YYYY-MM-DD string naming a real calendar day."""
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def entry_from_row(row: Workout) -> WorkoutEntry:
    """Map an ORM row onto the engine's read-only entry type."""
    return WorkoutEntry(
        id=row.id,
        date=row.date,
        type=row.type,
        duration_minutes=row.duration or 0,
        calories=row.calories or 0,
        notes=row.notes or "",
    )


async def fetch_snapshot(db: AsyncSession) -> List[WorkoutEntry]:
    """
    Read every stored workout.
    
    List-level filters never apply here: stats always cover the full store.
    
    Raises:
        SnapshotUnavailableError: If the database cannot be read
    """
    try:
        result = await db.execute(select(Workout).order_by(Workout.id))
        rows = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error("Failed to read workout snapshot", error=str(e))
        raise SnapshotUnavailableError("Workout data is unavailable") from e
    
    return [entry_from_row(row) for row in rows]


def prepare_snapshot(entries: Iterable[WorkoutEntry], policy: str = "skip") -> List[WorkoutEntry]:
    """
    Apply the malformed-date policy to a snapshot.
    
    Args:
        entries: Raw snapshot entries
        policy: "skip" drops bad entries with a warning, "reject" raises
        
    Returns:
        Entries whose date is a well-formed calendar date
        
    Raises:
        MalformedRecordError: On the first bad entry when policy is "reject"
    """
    valid = []
    for entry in entries:
        if is_calendar_date(entry.date):
            valid.append(entry)
            continue
        
        if policy == "reject":
            raise MalformedRecordError(entry.id, entry.date)
        
        logger.warning(
            "Skipping workout with malformed date",
            record_id=entry.id,
            date=entry.date,
        )
    
    return valid

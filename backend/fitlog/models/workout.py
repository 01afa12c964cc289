"""
Workout database model.
"""
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fitlog.core.database import Base


class Workout(Base):
    """A single logged exercise session."""
    
    __tablename__ = "workouts"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Stored as ISO text (YYYY-MM-DD); the stats engine validates it on read
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    calories: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    
    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "date": self.date,
            "type": self.type,
            "duration": self.duration,
            "calories": self.calories or 0,
            "notes": self.notes or "",
        }

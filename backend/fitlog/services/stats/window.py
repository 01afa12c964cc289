"""
Calendar window generation for the trailing-days reporting series.
"""
from datetime import date, timedelta
from typing import List

DEFAULT_WINDOW_DAYS = 7


def calendar_window(reference_date: date, days: int = DEFAULT_WINDOW_DAYS) -> List[date]:
    """
    Build the trailing reporting window.
    
    Args:
        reference_date: Last day of the window ("today" for live requests)
        days: Number of calendar days in the window
        
    Returns:
        `days` consecutive dates in ascending order, ending at reference_date
    """
    if days < 1:
        raise ValueError(f"Window must span at least one day, got {days}")
    
    first_day = reference_date - timedelta(days=days - 1)
    return [first_day + timedelta(days=offset) for offset in range(days)]

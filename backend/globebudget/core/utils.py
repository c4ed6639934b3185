"""
Utility functions for the application.
"""
from datetime import date, timedelta
from typing import List


def start_of_week(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def each_week_of_interval(start: date, end: date) -> List[date]:
    """
    List the Monday of every week touching [start, end].
    
    The first entry is the Monday on or before ``start``; an empty list is
    returned when ``end`` precedes ``start``.
    """
    if end < start:
        return []
    
    weeks = []
    current = start_of_week(start)
    while current <= end:
        weeks.append(current)
        current += timedelta(days=7)
    return weeks


def is_within(day: date, start: date, end: date) -> bool:
    """Inclusive interval membership."""
    return start <= day <= end

"""
Day-of-week enum and its weekday/weekend classifier.
"""
from __future__ import annotations
from enum import IntEnum


class Day(IntEnum):
    Monday = 0
    Tuesday = 1
    Wednesday = 2
    Thursday = 3
    Friday = 4
    Saturday = 5
    Sunday = 6


# Friday and Saturday count as the weekend here; Sunday does not
WEEKEND_DAYS = frozenset({Day.Friday, Day.Saturday})


def get_day_type(day: Day) -> str:
    if day in WEEKEND_DAYS:
        return "Weekend"
    return "Weekday"

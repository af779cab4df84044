"""
Core math modules для workweek

Календарная арифметика рабочих недель.
"""

from workweek.core.math.work_week import (
    DAYS_PER_WEEK,
    UNSIGNED_WRAP_MODULUS,
    calculate_work_week,
    compute_work_week,
    first_sunday,
    ordinal_day,
    weekday_from_sunday,
)

__all__ = [
    # Constants
    "DAYS_PER_WEEK",
    "UNSIGNED_WRAP_MODULUS",
    # Calendar primitives
    "first_sunday",
    "ordinal_day",
    "weekday_from_sunday",
    # Work week
    "calculate_work_week",
    "compute_work_week",
]

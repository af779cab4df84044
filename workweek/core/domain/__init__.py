"""
Domain models and value objects.

Contains the work week result model and the pre-anchor policy.
"""

from workweek.core.domain.work_week import PreAnchorPolicy, WorkWeekResult

__all__ = [
    "PreAnchorPolicy",
    "WorkWeekResult",
]

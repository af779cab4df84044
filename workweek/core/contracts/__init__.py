"""
Contract Validation Module

Модуль для валидации JSON контрактов workweek.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    WorkWeekResultValidator,
    validate_work_week_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WorkWeekResultValidator",
    # Functions
    "validate_work_week_result",
]

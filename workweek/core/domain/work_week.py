"""
WorkWeekResult — результат расчёта рабочей недели

Immutable Pydantic модель, представляющая номер рабочей недели для даты.
Полная совместимость с JSON Schema (contracts/schema/work_week_result.json).

Рабочая неделя 1 начинается в первое воскресенье на или после 1 января
(anchor). Номер для дат до anchor определяется политикой PreAnchorPolicy.
"""

import datetime
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class PreAnchorPolicy(str, Enum):
    """
    Политика для дат раньше первого воскресенья года.

    - ZERO: неделя 0 текущего года
    - PREVIOUS_YEAR: последняя рабочая неделя предыдущего года
    - UNSIGNED: 32-битный беззнаковый wraparound (совместимость со старым CLI)
    """

    ZERO = "zero"
    PREVIOUS_YEAR = "previous_year"
    UNSIGNED = "unsigned"


# =============================================================================
# WORK WEEK RESULT MODEL
# =============================================================================


class WorkWeekResult(BaseModel):
    """
    Результат расчёта рабочей недели.

    Immutable модель (frozen=True). Содержит:
    - Исходную дату и номер недели
    - Год, от anchor которого ведётся счёт (work_week_year)
    - Сам anchor и признак pre_anchor
    - Применённую политику
    """

    date: datetime.date = Field(..., description="Дата, для которой считается неделя")
    work_week: int = Field(..., ge=0, description="Номер рабочей недели")
    work_week_year: int = Field(
        ..., ge=1, le=9999, description="Год, к которому относится неделя"
    )
    anchor: datetime.date = Field(
        ..., description="Первое воскресенье на или после 1 января work_week_year"
    )
    pre_anchor: bool = Field(..., description="Дата раньше anchor своего года")
    policy: PreAnchorPolicy = Field(
        PreAnchorPolicy.ZERO, description="Политика для дат до anchor"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_anchor(self) -> "WorkWeekResult":
        """Проверка согласованности anchor: воскресенье в work_week_year"""
        if self.anchor.isoweekday() != 7:
            raise ValueError(f"anchor must be a Sunday, got {self.anchor.isoformat()}")
        if self.anchor.year != self.work_week_year:
            raise ValueError(
                f"anchor {self.anchor.isoformat()} is not in work_week_year "
                f"{self.work_week_year}"
            )
        return self

    @property
    def label(self) -> str:
        """Метка для вывода, например WW3"""
        return f"WW{self.work_week}"

    def to_payload(self) -> Dict[str, Any]:
        """
        Сериализация в JSON-совместимый dict (контракт work_week_result).

        Returns:
            dict с ISO-датами и строковым значением политики
        """
        payload = self.model_dump(mode="json")
        payload["label"] = self.label
        return payload

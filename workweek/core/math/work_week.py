"""
Work Week — расчёт номера рабочей недели

Рабочая неделя 1 начинается в первое воскресенье на или после 1 января
(anchor). Дальше номер растёт на 1 каждые 7 дней до конца года.

ФОРМУЛЫ:
    days_to_add = (7 - weekday_from_sunday(Jan 1)) mod 7
    anchor = Jan 1 + days_to_add
    work_week = (ordinal_day(date) - ordinal_day(anchor)) // 7 + 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. anchor всегда воскресенье и всегда даёт неделю 1
2. +7 дней после anchor (в пределах года) → неделя +1
3. Арифметика знаковая; даты до anchor обрабатываются явной PreAnchorPolicy
4. Все операции детерминированы, без I/O и без состояния
"""

import datetime
from typing import Final

from workweek.core.domain.work_week import PreAnchorPolicy, WorkWeekResult
from workweek.core.errors import InvalidDateError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DAYS_PER_WEEK: Final[int] = 7

# Разрядность беззнакового счётчика старого CLI (PreAnchorPolicy.UNSIGNED)
UNSIGNED_WRAP_MODULUS: Final[int] = 2**32


# =============================================================================
# КАЛЕНДАРНЫЕ ПРИМИТИВЫ
# =============================================================================


def weekday_from_sunday(day: datetime.date) -> int:
    """
    День недели с воскресеньем в качестве 0.

    Returns:
        0 = воскресенье, 1 = понедельник, ..., 6 = суббота

    Examples:
        >>> weekday_from_sunday(datetime.date(2023, 1, 1))
        0
        >>> weekday_from_sunday(datetime.date(2024, 1, 1))
        1
    """
    return day.isoweekday() % DAYS_PER_WEEK


def ordinal_day(day: datetime.date) -> int:
    """
    Порядковый номер дня в году (1 января = 1).

    Examples:
        >>> ordinal_day(datetime.date(2024, 1, 1))
        1
        >>> ordinal_day(datetime.date(2024, 12, 31))
        366
    """
    return day.timetuple().tm_yday


def first_sunday(year: int) -> datetime.date:
    """
    Anchor года: первое воскресенье на или после 1 января.

    Args:
        year: Календарный год

    Returns:
        1 января, если это воскресенье, иначе ближайшее следующее воскресенье

    Raises:
        InvalidDateError: Если 1 января года не представимо (year вне 1..9999)

    Examples:
        >>> first_sunday(2023)
        datetime.date(2023, 1, 1)
        >>> first_sunday(2024)
        datetime.date(2024, 1, 7)
    """
    try:
        first_jan = datetime.date(year, 1, 1)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError("Invalid start date", cause=e) from e

    days_to_add = (DAYS_PER_WEEK - weekday_from_sunday(first_jan)) % DAYS_PER_WEEK
    return first_jan + datetime.timedelta(days=days_to_add)


# =============================================================================
# WORK WEEK
# =============================================================================


def _as_date(day: datetime.date) -> datetime.date:
    # datetime — подкласс date; время суток не участвует в расчёте
    if isinstance(day, datetime.datetime):
        return day.date()
    return day


def compute_work_week(
    day: datetime.date,
    policy: PreAnchorPolicy = PreAnchorPolicy.ZERO,
) -> WorkWeekResult:
    """
    Полный расчёт рабочей недели для даты.

    Для дат на или после anchor:
        work_week = (ordinal_day(day) - ordinal_day(anchor)) // 7 + 1

    Для дат до anchor (ранний январь) применяется policy:
    - ZERO: work_week = 0, год и anchor — текущие
    - PREVIOUS_YEAR: счёт от anchor предыдущего года (последняя неделя года)
    - UNSIGNED: разность берётся по модулю 2**32, как в старом CLI

    Args:
        day: Календарная дата (datetime допускается, время отбрасывается)
        policy: Политика для дат до anchor (default: ZERO)

    Returns:
        WorkWeekResult

    Raises:
        InvalidDateError: Если не удалось построить 1 января нужного года
            (на практике только PREVIOUS_YEAR для года 1)
    """
    day = _as_date(day)
    policy = PreAnchorPolicy(policy)
    anchor = first_sunday(day.year)
    delta = ordinal_day(day) - ordinal_day(anchor)

    if delta >= 0:
        return WorkWeekResult(
            date=day,
            work_week=delta // DAYS_PER_WEEK + 1,
            work_week_year=day.year,
            anchor=anchor,
            pre_anchor=False,
            policy=policy,
        )

    if policy is PreAnchorPolicy.PREVIOUS_YEAR:
        previous_anchor = first_sunday(day.year - 1)
        days_since = (day - previous_anchor).days
        return WorkWeekResult(
            date=day,
            work_week=days_since // DAYS_PER_WEEK + 1,
            work_week_year=previous_anchor.year,
            anchor=previous_anchor,
            pre_anchor=True,
            policy=policy,
        )

    if policy is PreAnchorPolicy.UNSIGNED:
        wrapped = delta % UNSIGNED_WRAP_MODULUS
        work_week = wrapped // DAYS_PER_WEEK + 1
    else:
        work_week = 0

    return WorkWeekResult(
        date=day,
        work_week=work_week,
        work_week_year=day.year,
        anchor=anchor,
        pre_anchor=True,
        policy=policy,
    )


def calculate_work_week(
    day: datetime.date,
    policy: PreAnchorPolicy = PreAnchorPolicy.ZERO,
) -> int:
    """
    Номер рабочей недели для даты.

    Examples:
        >>> calculate_work_week(datetime.date(2024, 1, 14))
        2
        >>> calculate_work_week(datetime.date(2024, 1, 1))
        0
    """
    return compute_work_week(day, policy).work_week

"""
Date input — разбор и значение по умолчанию для аргумента DATE

"Сегодня" передаётся явно: чтение часов происходит только в CLI-команде,
все функции модуля детерминированы.
"""

import datetime
from typing import Final, Optional

from workweek.core.errors import DateParseError

DATE_FORMAT: Final[str] = "%Y-%m-%d"


def default_date_string(today: datetime.date) -> str:
    """
    Значение DATE по умолчанию.

    Examples:
        >>> default_date_string(datetime.date(2024, 3, 5))
        '2024-03-05'
    """
    return today.strftime(DATE_FORMAT)


def resolve_date_argument(raw: Optional[str], today: datetime.date) -> str:
    """
    Аргумент DATE, если задан, иначе today в формате YYYY-MM-DD.

    Args:
        raw: Значение из командной строки (nullable)
        today: Текущая дата, прочитанная вызывающим кодом
    """
    if raw is None:
        return default_date_string(today)
    return raw


def parse_date(raw: str) -> datetime.date:
    """
    Разбор строки YYYY-MM-DD в дату.

    Args:
        raw: Входная строка

    Returns:
        datetime.date

    Raises:
        DateParseError: Если строка не соответствует формату или дата
            не существует (например, 2024-02-30); исходный ValueError
            сохраняется как причина
    """
    try:
        return datetime.datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(raw, cause=e) from e

"""
Errors — иерархия ошибок workweek

Каждая ошибка несёт контекстное сообщение и (опционально) исходную причину.
Причина выставляется и как ``cause``, и как ``__cause__``, поэтому цепочка
видна и в traceback, и в пользовательском отчёте ``describe()``.

Иерархия:
- WorkWeekError      — базовая ошибка (контекст + причина)
- DateParseError     — строка не является датой YYYY-MM-DD
- InvalidDateError   — не удалось построить 1 января года
"""

from typing import List, Optional


class WorkWeekError(Exception):
    """
    Базовая ошибка с контекстом и цепочкой причин.

    Args:
        message: Контекст на уровне вызывающего кода
        cause: Исходная ошибка нижнего уровня (nullable)
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def chain(self) -> List[str]:
        """
        Сообщения от внешнего контекста к корневой причине.

        Returns:
            Список сообщений, первый элемент — self.message
        """
        messages: List[str] = []
        current: Optional[BaseException] = self
        while current is not None:
            if isinstance(current, WorkWeekError):
                messages.append(current.message)
            else:
                messages.append(str(current))
            current = current.__cause__
        return messages

    def describe(self) -> str:
        """
        Многострочный отчёт для stderr.

        Examples:
            >>> err = WorkWeekError("outer", cause=ValueError("inner"))
            >>> print(err.describe())
            Error: outer
            <BLANKLINE>
            Caused by:
                inner
        """
        head, *causes = self.chain()
        lines = [f"Error: {head}"]
        if causes:
            lines.append("")
            lines.append("Caused by:")
            if len(causes) == 1:
                lines.append(f"    {causes[0]}")
            else:
                for index, cause in enumerate(causes):
                    lines.append(f"   {index}: {cause}")
        return "\n".join(lines)


class DateParseError(WorkWeekError):
    """Входная строка не соответствует YYYY-MM-DD или не является датой."""

    def __init__(self, raw_input: str, cause: Optional[BaseException] = None):
        super().__init__(f"Could not parse the date: {raw_input}", cause=cause)
        self.raw_input = raw_input


class InvalidDateError(WorkWeekError):
    """Не удалось построить опорную дату (1 января) для года."""
    pass

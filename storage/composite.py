"""Группа sink'ов одной секции.

На одну секцию может быть зарегистрировано несколько обработчиков,
каждый вернёт свой sink. Группа держит их в порядке открытия.

Поведение:
- write_line() пишет строку + ``\\n`` в каждый sink по порядку;
  ошибка записи сразу уходит наверх (это фатальная ошибка ввода-вывода)
- close() закрывает ВСЕ sink'и в порядке открытия, собирая ошибки,
  и только потом пробрасывает первую
- после close() группа пуста и готова к следующей секции
"""

from __future__ import annotations

from typing import List, Optional

from .base import LineSink


class SinkGroup:
    """Активные sink'и текущей секции."""

    def __init__(self) -> None:
        self._sinks: List[LineSink] = []

    # ------------------------------------------------------------------
    def add(self, sink: Optional[LineSink]) -> None:
        # None: обработчик "видел" секцию, но собирать тело не хочет
        if sink is not None:
            self._sinks.append(sink)

    # ------------------------------------------------------------------
    def write_line(self, line: bytes) -> None:
        for s in self._sinks:
            s.write(line)
            s.write(b"\n")

    # ------------------------------------------------------------------
    def close(self) -> None:
        sinks, self._sinks = self._sinks, []

        errors: List[Exception] = []
        for s in sinks:
            try:
                s.close()
            except Exception as exc:
                errors.append(exc)
        if errors:
            raise errors[0]

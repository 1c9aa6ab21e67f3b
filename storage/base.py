"""Базовый интерфейс приёмника строк (sink).

Сканер секций ничего не знает про файлы: он получает от обработчика
объект с методами ``write`` и ``close`` и пишет туда тело секции.

Как использовать:
    sink: LineSink = BufferedFileSink(path)

    ... сканер пишет строки секции ...
    sink.write(line)
    sink.write(b"\\n")

    ... на границе секции или в конце потока ...
    sink.close()

Владелец sink'а после возврата из обработчика — сканер. Он гарантирует
ровно один вызов close() на любом пути выхода.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class LineSink(ABC):
    """Приёмник тела одной секции."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Дописать байты в приёмник."""

    @abstractmethod
    def close(self) -> None:
        """Финализация и закрытие ресурсов."""

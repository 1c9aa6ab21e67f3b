"""Приёмники тела секций.

Сканер (parser/*) пишет строки секции в LineSink и не знает,
куда они попадут на самом деле.

- LineSink — базовый интерфейс (write/close)
- BufferedFileSink — буферизованная запись в файл на диске
- SinkGroup — набор sink'ов одной секции с закрытием "всех, по порядку"
"""

from .base import LineSink
from .file_sink import BufferedFileSink
from .composite import SinkGroup

__all__ = [
    "LineSink",
    "BufferedFileSink",
    "SinkGroup",
]

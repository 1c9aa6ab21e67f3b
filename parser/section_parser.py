"""
Сканер секций supportconfig.

Входной поток — склейка многих файлов. Перед каждым файлом стоит
строка-разделитель и строка метаданных:

    #==[ Configuration File ]===========================#
    # /etc/hosts - 12 Lines
    127.0.0.1 localhost
    ...

Сканер узнаёт разделители, вызывает зарегистрированные обработчики
секции со строкой метаданных и дальше пишет все строки тела в sink'и,
которые вернули обработчики, до следующего разделителя или конца потока.

Состояния автомата:
  AWAITING_SECTION  — вне секции, строки выбрасываются
  AWAITING_METADATA — только что встретили разделитель, следующая строка — метаданные
  IN_BODY           — строки тела уходят в активные sink'и
"""

import contextlib
import enum
import re
from collections import defaultdict
from dataclasses import dataclass
from typing import BinaryIO, Callable, Dict, List, Optional

from storage import LineSink, SinkGroup

from .lines import DEFAULT_CHUNK_SIZE, iter_lines


# ---------------------------------------------------------------------------
# Константы
# ---------------------------------------------------------------------------

DELIMITER_PREFIX = b"#==[ "
DELIMITER_RE = re.compile(rb"#==\[ (.*?) \]=+")

# Строка метаданных почти всегда ASCII-путь, но байты могут быть любые.
# surrogateescape сохраняет их без потерь до os.fsencode().
METADATA_ENCODING = "utf-8"
METADATA_ERRORS = "surrogateescape"


# ---------------------------------------------------------------------------
# Типы
# ---------------------------------------------------------------------------

class SkipSection(Exception):
    """Обработчик отказывается от этой секции. Не ошибка: сканирование продолжается."""


# (section, metadata) -> sink | None; SkipSection: отказ, любое другое исключение фатально
HandlerFunc = Callable[[str, str], Optional[LineSink]]


class ScanState(enum.Enum):
    AWAITING_SECTION = "awaiting-section"
    AWAITING_METADATA = "awaiting-metadata"
    IN_BODY = "in-body"


@dataclass
class ParseStats:
    """Итоги одного прохода по потоку."""

    sections: int = 0
    body_lines: int = 0


def match_delimiter(line: bytes) -> Optional[str]:
    """Имя секции, если строка — разделитель, иначе None."""
    if not line.startswith(DELIMITER_PREFIX):
        return None
    m = DELIMITER_RE.match(line)
    if m is None:
        return None
    return m.group(1).decode(METADATA_ENCODING, METADATA_ERRORS)


# ---------------------------------------------------------------------------
# Сканер
# ---------------------------------------------------------------------------

class SectionParser:
    """
    Потоковый разбор supportconfig по секциям.

    Таблица обработчиков принадлежит экземпляру и заполняется до parse().
    Обработчики одной секции вызываются в порядке регистрации.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.chunk_size = chunk_size
        self._handlers: Dict[str, List[HandlerFunc]] = defaultdict(list)

    # ------------------------------------------------------------------
    # Публичный API
    # ------------------------------------------------------------------

    def register_handler(self, section: str, handler: HandlerFunc) -> None:
        """
        Добавить обработчик секции.

        Регистрация во время parse() не поддерживается.
        """
        self._handlers[section].append(handler)

    def parse(self, stream: BinaryIO) -> ParseStats:
        """
        Прочитать поток до конца, раздавая секции обработчикам.

        Исключения обработчиков (кроме SkipSection) и ошибки чтения/записи
        прерывают разбор и уходят наверх как есть. Открытые sink'и при этом
        всё равно закрываются.

        Args:
            stream: Бинарный поток supportconfig

        Returns:
            ParseStats с числом секций и строк тела
        """
        stats = ParseStats()
        state = ScanState.AWAITING_SECTION
        section = ""
        sinks = SinkGroup()

        try:
            for line in iter_lines(stream, self.chunk_size):
                # Строка с префиксом "#==[ ", но без полного разделителя, не теряется:
                # это обычные данные (метаданные или тело секции)
                name = match_delimiter(line)
                if name is not None:
                    # Старые sink'и закрываем ДО обработчиков новой секции
                    sinks.close()
                    section = name
                    state = ScanState.AWAITING_METADATA
                    stats.sections += 1
                    continue

                if state is ScanState.AWAITING_SECTION:
                    continue

                if state is ScanState.AWAITING_METADATA:
                    metadata = line.decode(METADATA_ENCODING, METADATA_ERRORS)
                    self._dispatch(section, metadata, sinks)
                    state = ScanState.IN_BODY
                    continue

                sinks.write_line(line)
                stats.body_lines += 1
        except BaseException:
            # Разбор уже прерван: sink'и закрываем, но наружу уходит исходная ошибка
            with contextlib.suppress(Exception):
                sinks.close()
            raise

        sinks.close()
        return stats

    # ------------------------------------------------------------------
    # Внутреннее
    # ------------------------------------------------------------------

    def _dispatch(self, section: str, metadata: str, sinks: SinkGroup) -> None:
        """Отдать строку метаданных всем обработчикам секции."""
        for handler in self._handlers.get(section, ()):
            try:
                sink = handler(section, metadata)
            except SkipSection:
                continue
            sinks.add(sink)

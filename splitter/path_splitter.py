"""
Разрезание supportconfig обратно на файлы.

Splitter регистрирует один и тот же обработчик на секции
"Configuration File" и "Log File". Обработчик превращает строку
метаданных в путь, при необходимости пропускает его через
пользовательскую функцию переименования и создаёт файл под base.

Функция переименования (path_handler):
  - получает очищенный относительный путь
  - возвращает новый путь (переименование, смена расширения, другая папка)
  - пустая строка / None — секцию осознанно пропускаем, это не ошибка
  - исключение — прерывает весь разбор
"""

from pathlib import Path
from typing import BinaryIO, Callable, List, Optional, Sequence, Union

from parser import ParseStats, SectionParser, SkipSection
from parser.lines import DEFAULT_CHUNK_SIZE
from storage import BufferedFileSink, LineSink

from .paths import clean_path, metadata_to_path


SECTIONS = ("Configuration File", "Log File")

PathHandlerFunc = Callable[[str], Optional[str]]


class Splitter:
    """
    Раскладывает секции supportconfig по файлам внутри base.

    Args:
        base: Каталог назначения
        path_handler: Функция переименования путей (опционально)
        sections: Имена секций, которые превращаются в файлы
        chunk_size: Размер порции чтения входного потока
    """

    def __init__(
        self,
        base: Union[str, Path],
        path_handler: Optional[PathHandlerFunc] = None,
        *,
        sections: Sequence[str] = SECTIONS,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.base = Path(base)
        self.path_handler = path_handler
        self.sections = tuple(sections)
        self.chunk_size = chunk_size

        # Итоги последнего split(), для сводки в main.py
        self.written: List[Path] = []
        self.skipped = 0

    # ------------------------------------------------------------------
    def split(self, source: BinaryIO) -> ParseStats:
        """Прочитать поток и создать файлы. Ошибки уходят наверх как есть."""
        self.written = []
        self.skipped = 0

        parser = SectionParser(chunk_size=self.chunk_size)
        for name in self.sections:
            parser.register_handler(name, self.handle_section)

        return parser.parse(source)

    # ------------------------------------------------------------------
    def resolve(self, metadata: str) -> Optional[Path]:
        """
        Строка метаданных -> путь файла назначения или None (пропуск).

        Raises:
            SkipSection: строка метаданных не даёт пути
        """
        orig = metadata_to_path(metadata)

        if self.path_handler is None:
            dest = orig
        else:
            new = self.path_handler(orig)
            if not new:
                return None
            dest = clean_path(new)
            if not dest:
                return None

        return self.base / dest

    # ------------------------------------------------------------------
    def handle_section(self, section: str, metadata: str) -> Optional[LineSink]:
        try:
            path = self.resolve(metadata)
        except SkipSection:
            self.skipped += 1
            raise

        if path is None:
            self.skipped += 1
            return None

        path.parent.mkdir(parents=True, exist_ok=True)
        sink = BufferedFileSink(path)
        self.written.append(path)
        return sink

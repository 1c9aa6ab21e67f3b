"""
Разбор строки метаданных в относительный путь внутри архива.

Форматы, которые встречаются после разделителя секции:

    # /etc/hosts                       -> etc/hosts
    # /var/log/messages - 1520 Lines   -> var/log/messages
    # /etc/foo.conf - File not found   -> пропуск
    #==[ Command ]==...                 -> (не наш формат, пропуск)
"""

import posixpath

from parser import SkipSection


METADATA_PREFIX = "# "
FILE_NOT_FOUND = "File not found"
LINES_SUFFIX = " Lines"
LINES_SEPARATOR = " - "


def clean_path(path: str) -> str:
    """
    Нормализация пути: ``.``/``..``, повторные ``/``.

    Путь сначала "подвешивается" к корню, поэтому ``..`` не может
    подняться выше него, а затем ведущий ``/`` убирается: результат
    всегда относительный. Пустая строка — путь никуда не ведёт.
    """
    if not path:
        return ""
    # normpath оставляет ровно два ведущих слэша, поэтому lstrip, а не [1:]
    return posixpath.normpath("/" + path).lstrip("/")


def strip_line_count(rest: str) -> str:
    """Отрезать хвост ``" - N Lines"``, если он есть."""
    if rest.endswith(LINES_SUFFIX):
        idx = rest.rfind(LINES_SEPARATOR)
        if idx > 0:
            return rest[:idx]
    return rest


def metadata_to_path(metadata: str) -> str:
    """
    Строка метаданных -> очищенный относительный путь.

    Raises:
        SkipSection: строка не похожа на путь, файла не было
            или после очистки путь пустой
    """
    if not metadata.startswith(METADATA_PREFIX):
        raise SkipSection(metadata)

    rest = metadata[len(METADATA_PREFIX):]
    if FILE_NOT_FOUND in rest:
        raise SkipSection(metadata)

    path = clean_path(strip_line_count(rest))
    if not path:
        raise SkipSection(metadata)
    return path

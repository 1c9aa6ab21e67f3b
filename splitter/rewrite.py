"""
Сборка функции переименования путей из настроек.

Позволяет без кода:
  - оставить только нужные файлы (INCLUDE_PATHS, glob)
  - выбросить лишние (EXCLUDE_PATHS, glob)
  - добавить суффикс к имени каждого файла (OUTPUT_SUFFIX, например ".txt")

Шаблоны сравниваются с очищенным относительным путём (``etc/hosts``),
семантика — fnmatch: ``*`` проходит и через ``/``.
"""

from fnmatch import fnmatchcase
from typing import Optional, Sequence

from .path_splitter import PathHandlerFunc


def _matches(path: str, patterns: Sequence[str]) -> bool:
    # Ведущий "/" в шаблоне допускаем: люди пишут /var/log/*
    return any(fnmatchcase(path, p.lstrip("/")) for p in patterns)


def build_path_handler(
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
    suffix: str = "",
) -> Optional[PathHandlerFunc]:
    """
    Функция переименования для Splitter или None, если настраивать нечего.

    Порядок: include -> exclude -> suffix.
    """
    include = [p for p in include if p]
    exclude = [p for p in exclude if p]

    if not include and not exclude and not suffix:
        return None

    def handler(path: str) -> str:
        if include and not _matches(path, include):
            return ""
        if exclude and _matches(path, exclude):
            return ""
        return path + suffix

    return handler

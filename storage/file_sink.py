"""Буферизованная запись тела секции в файл.

Файл создаётся (или обрезается, если уже был) в момент создания sink'а,
чтобы ошибки прав/диска всплыли сразу в обработчике секции, а не
при первой записи.

close() сбрасывает буфер и закрывает дескриптор вместе и только один раз:
повторный вызов ничего не делает.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional

from .base import LineSink

# Размер буфера записи. Тела секций обычно конфиги и логи,
# 64 KiB с запасом хватает, чтобы не дёргать write() на каждую строку.
DEFAULT_BUFFER_SIZE = 64 * 1024


class BufferedFileSink(LineSink):
    """Пишет тело секции в файл через буфер."""

    def __init__(self, path: Path, *, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._path = Path(path)
        self._fh: Optional[BinaryIO] = open(self._path, "wb", buffering=buffer_size)

    # ------------------------------------------------------------------
    def write(self, data: bytes) -> None:
        if self._fh is None:
            raise ValueError(f"write to closed sink: {self._path}")
        self._fh.write(data)

    # ------------------------------------------------------------------
    def close(self) -> None:
        if self._fh is None:
            return

        fh, self._fh = self._fh, None
        try:
            fh.flush()
        finally:
            # Дескриптор закрываем даже если flush упал (ENOSPC и т.п.)
            fh.close()

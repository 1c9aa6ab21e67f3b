"""
Нарезка входного потока на строки.

Отличие от стандартного построчного чтения:
  - разделитель только голый ``\\n``
  - ``\\r`` в конце строки НЕ отрезается — это данные вложенного файла
  - последняя строка без перевода строки тоже отдаётся
"""

from typing import BinaryIO, Iterator

# Сколько байт читаем за один вызов read()
DEFAULT_CHUNK_SIZE = 64 * 1024


def iter_lines(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Построчное чтение бинарного потока.

    Читаем через ``stream.read()`` кусками (а не итерацией по файлу),
    чтобы обёртка прогресс-бара над read() видела каждый прочитанный байт.

    Ошибки чтения (OSError) не глушим: они уходят вызывающему коду.

    Args:
        stream: Бинарный поток (файл, sys.stdin.buffer, BytesIO)
        chunk_size: Размер порции чтения в байтах

    Yields:
        Строки без завершающего ``\\n``
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    # Куски незавершённой строки. Склеиваем только когда встретили \n,
    # иначе длинная строка без переводов даёт квадратичное копирование.
    pending: list[bytes] = []

    while True:
        data = stream.read(chunk_size)
        if not data:
            break

        start = 0
        while True:
            idx = data.find(b"\n", start)
            if idx < 0:
                break
            if pending:
                pending.append(data[start:idx])
                yield b"".join(pending)
                pending = []
            else:
                yield data[start:idx]
            start = idx + 1

        if start < len(data):
            pending.append(data[start:])

    # Хвост без перевода строки тоже строка
    if pending:
        yield b"".join(pending)

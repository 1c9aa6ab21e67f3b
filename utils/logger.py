"""
Модуль для логирования событий приложения.

Использует стандартный logging. Пишем в stderr, чтобы не смешивать
логи со сводкой в stdout и не ломать прогресс-бар tqdm.

Что попадает в лог:
  - ошибки конфигурации (.env / аргументы) перед стартом
  - ошибки ввода-вывода и прерванный разбор (main.py, код выхода 1)
  - итог разрезания: сколько файлов записано и куда
  - замеры времени utils/timer.py при SHOW_PERFORMANCE_METRICS=true

Ядро (parser/*, splitter/*, storage/*) само ничего не логирует.
"""

import logging
import sys


def _setup_logger(name: str = "supportconfig_splitter") -> logging.Logger:
    """
    Настройка и возврат логгера.

    Все сообщения пишутся в stderr.
    """
    log = logging.getLogger(name)

    if log.handlers:
        # Логгер уже настроен (защита от повторного вызова при переимпорте)
        return log

    log.setLevel(logging.DEBUG)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    log.addHandler(handler)

    return log


# Глобальный экземпляр логгера
logger = _setup_logger()

"""
Модуль настроек приложения.
Загружает и валидирует переменные окружения из .env файла.
"""

import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv


# Загружаем переменные из .env файла (ищем рядом с корнем проекта)
_env_path = Path(__file__).parent.parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: str = 'false') -> bool:
    """Безопасное чтение булевой переменной окружения."""
    return os.getenv(key, default).strip().lower() == 'true'


def _get_int(key: str, default: str = '0') -> int:
    """Безопасное чтение целочисленной переменной окружения."""
    return int(os.getenv(key, default).strip())


def _get_list(key: str, default: str = '') -> List[str]:
    """Чтение списка из переменной окружения (значения через запятую)."""
    raw = os.getenv(key, default).strip()
    if not raw:
        return []
    return [item.strip() for item in raw.split(',') if item.strip()]


class Settings:
    """
    Класс для хранения и валидации настроек приложения.

    Все значения вычисляются в __init__, чтобы тесты могли подменить
    окружение и просто создать новый экземпляр.
    """

    def __init__(self):
        # --- Input ---
        # "-": читаем supportconfig из stdin
        self.SUPPORTCONFIG_INPUT: str = os.getenv('SUPPORTCONFIG_INPUT', '-').strip() or '-'
        self.READ_CHUNK_SIZE: int = _get_int('READ_CHUNK_SIZE', str(64 * 1024))

        # --- Output ---
        self.OUTPUT_DIR: str = os.getenv('OUTPUT_DIR', 'output').strip()

        # Фильтры путей (glob, через запятую). Сравниваются с путём
        # внутри архива, например: etc/*,var/log/messages
        self.INCLUDE_PATHS: List[str] = _get_list('INCLUDE_PATHS')
        self.EXCLUDE_PATHS: List[str] = _get_list('EXCLUDE_PATHS')

        # Суффикс к имени каждого файла (например ".txt", чтобы
        # конфиги без расширения открывались редактором)
        self.OUTPUT_SUFFIX: str = os.getenv('OUTPUT_SUFFIX', '').strip()

        # --- Performance & logging ---
        self.SHOW_PROGRESS_BAR: bool = _get_bool('SHOW_PROGRESS_BAR', 'false')
        self.SHOW_PERFORMANCE_METRICS: bool = _get_bool('SHOW_PERFORMANCE_METRICS', 'false')

    # ------------------------------------------------------------------
    def validate(self) -> None:
        """Валидация настроек приложения. Бросает ValueError при ошибках."""
        errors: List[str] = []

        if not self.OUTPUT_DIR:
            errors.append("OUTPUT_DIR must be set")

        if self.READ_CHUNK_SIZE <= 0:
            errors.append("READ_CHUNK_SIZE must be positive")

        if '/' in self.OUTPUT_SUFFIX:
            errors.append("OUTPUT_SUFFIX must not contain '/'")

        if self.SUPPORTCONFIG_INPUT != '-' and not Path(self.SUPPORTCONFIG_INPUT).is_file():
            errors.append(f"SUPPORTCONFIG_INPUT is not a file: {self.SUPPORTCONFIG_INPUT}")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

    # ------------------------------------------------------------------
    def display(self) -> None:
        """Вывод текущих настроек в читаемом виде."""
        print("=" * 80)
        print("CONFIGURATION SETTINGS")
        print("=" * 80)
        print(f"  Input                : {'stdin' if self.SUPPORTCONFIG_INPUT == '-' else self.SUPPORTCONFIG_INPUT}")
        print(f"  Output directory     : {self.OUTPUT_DIR}")
        print(f"  Include paths        : {', '.join(self.INCLUDE_PATHS) if self.INCLUDE_PATHS else 'All'}")
        print(f"  Exclude paths        : {', '.join(self.EXCLUDE_PATHS) if self.EXCLUDE_PATHS else 'None'}")
        print(f"  Output suffix        : {self.OUTPUT_SUFFIX or '-'}")
        print(f"  Read chunk size      : {self.READ_CHUNK_SIZE} bytes")
        print(f"  Show progress bar    : {self.SHOW_PROGRESS_BAR}")
        print(f"  Performance metrics  : {self.SHOW_PERFORMANCE_METRICS}")
        print("=" * 80)


# Единственный экземпляр настроек для использования во всех модулях
settings = Settings()

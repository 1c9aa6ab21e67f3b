"""
Утилита для замера времени выполнения участков кода.

Пример:

    from utils.timer import timer

    with timer.measure("split"):
        splitter.split(stream)

Замеры отображаются в логах ТОЛЬКО если SHOW_PERFORMANCE_METRICS=true.
Иначе замеры работают, но ничего не печатают — можно использовать
get_elapsed() / last() для ручного контроля.
"""

import time
from typing import Dict, Optional
from contextlib import contextmanager

from utils.logger import logger


class PerformanceTimer:
    """
    Класс для замера времени выполнения участков кода.

    Args:
        show_metrics: Выводить ли замеры в лог (управляется через .env)
    """

    def __init__(self, show_metrics: bool = False):
        self.show_metrics = show_metrics
        self._timers: Dict[str, float] = {}
        self._results: Dict[str, float] = {}

    # ------------------------------------------------------------------
    def start(self, label: str) -> None:
        self._timers[label] = time.perf_counter()

    # ------------------------------------------------------------------
    def end(self, label: str) -> Optional[float]:
        """
        Окончание замера и вывод результата в лог (если включено).

        Returns:
            Время выполнения в миллисекундах или None если метка не найдена
        """
        elapsed = self.get_elapsed(label)
        if elapsed is None:
            if self.show_metrics:
                logger.warning(f"Timer '{label}' was not started")
            return None

        if self.show_metrics:
            logger.info(f"⏱  [{label}] completed in {elapsed:.4f} ms")

        del self._timers[label]
        self._results[label] = elapsed
        return elapsed

    # ------------------------------------------------------------------
    def get_elapsed(self, label: str) -> Optional[float]:
        """Миллисекунды от start() до «сейчас», без лога и без удаления метки."""
        if label not in self._timers:
            return None
        return (time.perf_counter() - self._timers[label]) * 1000

    def last(self, label: str) -> Optional[float]:
        """Результат последнего завершённого замера с этой меткой."""
        return self._results.get(label)

    # ------------------------------------------------------------------
    @contextmanager
    def measure(self, label: str):
        self.start(label)
        try:
            yield
        finally:
            self.end(label)


def _create_timer() -> PerformanceTimer:
    """
    Создание глобального таймера с учётом настроек.

    Вынесено в функцию, чтобы избежать циклического импорта
    (timer ← settings ← ... ← timer).
    """
    from config.settings import settings
    return PerformanceTimer(show_metrics=settings.SHOW_PERFORMANCE_METRICS)


# Глобальный экземпляр, импортируйте как: from utils.timer import timer
timer = _create_timer()

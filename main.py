"""Разрезание supportconfig-архива обратно на отдельные файлы.

supportconfig — один большой текстовый файл, в который склеены конфиги
и логи системы. Перед каждым вложенным файлом стоит строка-разделитель
``#==[ Configuration File ]===...`` и строка с исходным путём.

Этапы:
  1) Читаем настройки (.env / окружение), поверх — аргументы командной строки
  2) Собираем функцию переименования путей (include/exclude/suffix)
  3) Потоково читаем вход и раскладываем секции по файлам в OUTPUT_DIR
  4) Печатаем сводку

Запуск:
    python main.py scc_host_201001_1200.txt -o ./host
    cat supportconfig.txt | python main.py -o ./host --include 'etc/*'
"""

from __future__ import annotations

import argparse
import copy
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, List, Optional

from config.settings import Settings, settings
from parser import ParseStats
from splitter import Splitter, build_path_handler
from utils.logger import logger
from utils.timer import timer


# ---------------------------------------------------------------------------
# Утилиты
# ---------------------------------------------------------------------------

def _get_tqdm(cfg: Settings):
    """Возвращает tqdm если включён прогресс-бар, иначе None."""
    if not cfg.SHOW_PROGRESS_BAR:
        return None
    try:
        from tqdm import tqdm
        return tqdm
    except ImportError:
        logger.warning("tqdm not installed — progress bar disabled")
        return None


def build_arg_parser(cfg: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a supportconfig archive back into individual files.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('input', nargs='?', default=cfg.SUPPORTCONFIG_INPUT,
                        help="supportconfig text file ('-' for stdin).")
    parser.add_argument('-o', '--output', default=cfg.OUTPUT_DIR,
                        help='Base output directory.')
    parser.add_argument('--include', action='append', default=None, metavar='GLOB',
                        help='Only write paths matching GLOB (repeatable).')
    parser.add_argument('--exclude', action='append', default=None, metavar='GLOB',
                        help='Do not write paths matching GLOB (repeatable).')
    parser.add_argument('--suffix', default=cfg.OUTPUT_SUFFIX,
                        help='Suffix appended to every output file name.')
    parser.add_argument('--progress', action='store_true', default=cfg.SHOW_PROGRESS_BAR,
                        help='Show a progress bar over input bytes.')
    return parser


def resolve_settings(argv: Optional[List[str]] = None, base: Optional[Settings] = None) -> Settings:
    """Настройки из окружения + аргументы командной строки поверх."""
    cfg = copy.copy(base if base is not None else settings)
    args = build_arg_parser(cfg).parse_args(argv)

    cfg.SUPPORTCONFIG_INPUT = args.input
    cfg.OUTPUT_DIR = args.output
    if args.include is not None:
        cfg.INCLUDE_PATHS = args.include
    if args.exclude is not None:
        cfg.EXCLUDE_PATHS = args.exclude
    cfg.OUTPUT_SUFFIX = args.suffix
    cfg.SHOW_PROGRESS_BAR = args.progress
    return cfg


# ---------------------------------------------------------------------------
# Разрезание
# ---------------------------------------------------------------------------

def split_stream(source: BinaryIO, cfg: Settings, total: Optional[int] = None) -> tuple[Splitter, ParseStats]:
    """Разрезать поток по настройкам cfg. Ошибки не перехватываются."""
    splitter = Splitter(
        cfg.OUTPUT_DIR,
        build_path_handler(cfg.INCLUDE_PATHS, cfg.EXCLUDE_PATHS, cfg.OUTPUT_SUFFIX),
        chunk_size=cfg.READ_CHUNK_SIZE,
    )

    tqdm_cls = _get_tqdm(cfg)
    with ExitStack() as stack:
        if tqdm_cls is not None:
            source = stack.enter_context(
                tqdm_cls.wrapattr(source, "read", total=total, desc="Splitting",
                                  unit="B", unit_scale=True, unit_divisor=1024)
            )
        with timer.measure("split"):
            stats = splitter.split(source)

    return splitter, stats


def run(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = resolve_settings(argv)
        cfg.validate()
    except ValueError as exc:
        logger.error(f"Configuration error: {exc}")
        return 1

    cfg.display()

    try:
        Path(cfg.OUTPUT_DIR).mkdir(parents=True, exist_ok=True)
        with ExitStack() as stack:
            if cfg.SUPPORTCONFIG_INPUT == '-':
                source, total = sys.stdin.buffer, None
            else:
                source = stack.enter_context(open(cfg.SUPPORTCONFIG_INPUT, 'rb'))
                total = Path(cfg.SUPPORTCONFIG_INPUT).stat().st_size
            splitter, stats = split_stream(source, cfg, total)
    except OSError as exc:
        logger.error(f"I/O error: {exc}")
        return 1
    except Exception as exc:
        logger.error(f"Split aborted: {exc!r}")
        return 1

    logger.info(f"Split complete: {len(splitter.written)} files -> {cfg.OUTPUT_DIR}")

    print("\n" + "=" * 80)
    print("SPLIT COMPLETE")
    print("=" * 80)
    print(f"  Sections seen        : {stats.sections}")
    print(f"  Body lines           : {stats.body_lines}")
    print(f"  Files written        : {len(splitter.written)}")
    print(f"  Sections skipped     : {splitter.skipped}")
    print(f"  Output directory     : {cfg.OUTPUT_DIR}")
    elapsed = timer.last("split")
    if elapsed is not None:
        print(f"  Elapsed              : {elapsed:.1f} ms")
    print("=" * 80 + "\n")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(0)

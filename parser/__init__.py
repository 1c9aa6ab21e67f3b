from .lines import iter_lines
from .section_parser import (
    HandlerFunc,
    ParseStats,
    ScanState,
    SectionParser,
    SkipSection,
    match_delimiter,
)

__all__ = [
    "iter_lines",
    "HandlerFunc",
    "ParseStats",
    "ScanState",
    "SectionParser",
    "SkipSection",
    "match_delimiter",
]

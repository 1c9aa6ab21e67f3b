from .path_splitter import SECTIONS, PathHandlerFunc, Splitter
from .paths import clean_path, metadata_to_path
from .rewrite import build_path_handler

__all__ = [
    "SECTIONS",
    "PathHandlerFunc",
    "Splitter",
    "build_path_handler",
    "clean_path",
    "metadata_to_path",
]

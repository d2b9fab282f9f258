# mend/utils/__init__.py
from .paths import normalize_header_path
from .selection import select_file_diffs
from .text import leading_ws, normalize_line

__all__ = [
    "normalize_header_path",
    "select_file_diffs",
    "leading_ws",
    "normalize_line",
]

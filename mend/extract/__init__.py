from .parser import parse_hunk_header, parse_patch
from .sanitize import sanitize_diff, sanitize_lines

__all__ = [
    "parse_patch",
    "parse_hunk_header",
    "sanitize_diff",
    "sanitize_lines",
]

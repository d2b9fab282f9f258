from .apply import apply_hunk
from .core import apply_file_diff, patch_text
from .lookup import build_lookup_tables
from .matcher import anchor_score, dedupe_matches, locate_hunk
from .options import MatchOptions

__all__ = [
    "apply_hunk",
    "apply_file_diff",
    "patch_text",
    "build_lookup_tables",
    "locate_hunk",
    "dedupe_matches",
    "anchor_score",
    "MatchOptions",
]

from .commit import (
    MatchOptions,
    apply_file_diff,
    apply_hunk,
    build_lookup_tables,
    dedupe_matches,
    locate_hunk,
    patch_text,
)
from .errors import (
    AmbiguousMatchError,
    MendError,
    NoMatchError,
    NoMatchingChangesError,
    ParseError,
    PatchFailedError,
)
from .extract import parse_patch, sanitize_diff
from .models import FileDiff, Hunk, HunkMatch, Line, Patch
from .utils import normalize_line, select_file_diffs

__all__ = [
    "parse_patch",
    "sanitize_diff",
    "normalize_line",
    "build_lookup_tables",
    "locate_hunk",
    "dedupe_matches",
    "apply_hunk",
    "apply_file_diff",
    "patch_text",
    "select_file_diffs",
    "MatchOptions",
    "Line",
    "Hunk",
    "FileDiff",
    "Patch",
    "HunkMatch",
    "MendError",
    "ParseError",
    "PatchFailedError",
    "NoMatchError",
    "AmbiguousMatchError",
    "NoMatchingChangesError",
]

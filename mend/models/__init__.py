from .diff import ADDITION, CONTEXT, DEV_NULL, REMOVAL, FileDiff, Hunk, Line, Patch
from .match import HunkMatch

__all__ = [
    "ADDITION",
    "CONTEXT",
    "DEV_NULL",
    "REMOVAL",
    "Line",
    "Hunk",
    "FileDiff",
    "Patch",
    "HunkMatch",
]

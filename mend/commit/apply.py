# mend/commit/apply.py
from __future__ import annotations

from typing import List, Sequence

from ..models.diff import Hunk


def apply_hunk(lines: Sequence[str], hunk: Hunk, start_index: int, matched_length: int) -> List[str]:
    """
    Return a new line list with ``lines[start_index:start_index + matched_length]``
    replaced by the hunk's context and addition lines, in hunk order.

    The matched span is discarded wholesale; the input is left untouched.
    """
    end = start_index + matched_length
    return list(lines[:start_index]) + hunk.replacement_lines + list(lines[end:])

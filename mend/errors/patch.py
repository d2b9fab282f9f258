from __future__ import annotations

from typing import List, Optional

from .base import MendError


class PatchFailedError(MendError):
    """A hunk could not be applied to the target lines."""

    def __init__(self, message: str, hunk_index: Optional[int] = None, hunk_count: Optional[int] = None):
        self.hunk_index = hunk_index
        self.hunk_count = hunk_count
        super().__init__(message)


def _label(hunk_index: int, hunk_count: int, header: Optional[str]) -> str:
    label = f"{hunk_index + 1}/{hunk_count}"
    return f"{label} ({header})" if header else label


class NoMatchError(PatchFailedError):
    """No candidate location was found for a hunk."""

    def __init__(self, hunk_index: int, hunk_count: int, header: Optional[str] = None):
        self.header = header
        super().__init__(
            f"Failed to apply hunk {_label(hunk_index, hunk_count, header)}. Could not find matching context.",
            hunk_index,
            hunk_count,
        )


class AmbiguousMatchError(PatchFailedError):
    """Several candidate locations scored within the retention band of the best one."""

    def __init__(self, hunk_index: int, hunk_count: int, matches: List, header: Optional[str] = None):
        self.header = header
        self.matches = list(matches)
        where = ", ".join(f"lines {m.start_index + 1}-{m.end_index} ({m.score:.2f})" for m in self.matches)
        super().__init__(
            f"Hunk {_label(hunk_index, hunk_count, header)} matches {len(self.matches)} locations: {where}",
            hunk_index,
            hunk_count,
        )

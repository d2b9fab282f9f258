# mend/commit/options.py
"""Matching knobs and the empirically chosen scoring constants."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FUZZINESS = 2
DEFAULT_MATCH_THRESHOLD = 0.7

STRICT_SCORE = 1.0
WHITESPACE_SCORE = 0.9

# Anchor-heuristic score = LCS_WEIGHT * lcs_score + DENSITY_WEIGHT * density
LCS_WEIGHT = 0.7
DENSITY_WEIGHT = 0.3
INDENT_BONUS = 0.05

# Window for pairing top and bottom anchors.
MIN_WINDOW_SLACK = 10
WINDOW_SLACK_PER_CHANGE = 4
MAX_WINDOW = 400

# Bonus for candidates near the hunk header's old_start.
PROXIMITY_MAX_BONUS = 0.05
PROXIMITY_DISTANCE = 50

# Survivors must score at least this fraction of the best score.
DEDUP_BAND = 0.9


@dataclass
class MatchOptions:
    """
    fuzziness: 0 = exact only, 1 = + whitespace-insensitive, 2 = + anchor heuristic.
    match_threshold: minimum score an anchor-heuristic candidate must reach.
    min_line: lowest acceptable start index (forward-scanning callers only).
    """

    fuzziness: int = DEFAULT_FUZZINESS
    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    min_line: int = 0

    def validate(self) -> "MatchOptions":
        if self.fuzziness not in (0, 1, 2):
            raise ValueError(f"fuzziness must be 0, 1 or 2, got {self.fuzziness!r}")
        if not 0.0 <= self.match_threshold <= 1.0:
            raise ValueError(f"match_threshold must be within [0, 1], got {self.match_threshold!r}")
        if self.min_line < 0:
            raise ValueError(f"min_line must be >= 0, got {self.min_line!r}")
        return self

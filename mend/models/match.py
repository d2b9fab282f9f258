from dataclasses import dataclass


@dataclass
class HunkMatch:
    """A candidate location for a hunk in the current state of a file."""

    start_index: int      # 0-based index into the current line array
    matched_length: int   # original lines consumed by the match
    score: float          # 0.0 - 1.0 confidence
    density: float = 1.0  # anchor count / matched span length

    @property
    def end_index(self) -> int:
        return self.start_index + self.matched_length

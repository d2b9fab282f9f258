# mend/models/diff.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

# Line kinds are the unified-diff markers themselves.
CONTEXT = " "
ADDITION = "+"
REMOVAL = "-"

# Sentinel path used for the missing side of a file creation or deletion.
DEV_NULL = "/dev/null"

_INVERTED_KIND = {CONTEXT: CONTEXT, ADDITION: REMOVAL, REMOVAL: ADDITION}


@dataclass(frozen=True)
class Line:
    """One hunk line: its kind (' ', '+' or '-') and its text without the marker."""

    kind: str
    text: str

    @classmethod
    def context(cls, text: str) -> "Line":
        return cls(CONTEXT, text)

    @classmethod
    def addition(cls, text: str) -> "Line":
        return cls(ADDITION, text)

    @classmethod
    def removal(cls, text: str) -> "Line":
        return cls(REMOVAL, text)

    @property
    def is_context(self) -> bool:
        return self.kind == CONTEXT

    @property
    def is_addition(self) -> bool:
        return self.kind == ADDITION

    @property
    def is_removal(self) -> bool:
        return self.kind == REMOVAL

    @property
    def is_anchor(self) -> bool:
        """Context and removal lines are the evidence searched for in the target."""
        return self.kind != ADDITION

    def invert(self) -> "Line":
        return Line(_INVERTED_KIND[self.kind], self.text)

    def __str__(self) -> str:
        return self.kind + self.text


@dataclass
class Hunk:
    """
    One ``@@ -old_start,old_lines +new_start,new_lines @@`` block.

    The header numbers are only a hint for where the hunk used to live;
    matching never trusts them.
    """

    old_start: int = 0
    old_lines: int = 0
    new_start: int = 0
    new_lines: int = 0
    lines: List[Line] = field(default_factory=list)

    @property
    def anchor_lines(self) -> List[str]:
        return [ln.text for ln in self.lines if ln.is_anchor]

    @property
    def additions(self) -> List[str]:
        return [ln.text for ln in self.lines if ln.is_addition]

    @property
    def removals(self) -> List[str]:
        return [ln.text for ln in self.lines if ln.is_removal]

    @property
    def replacement_lines(self) -> List[str]:
        """What the matched span becomes: context and additions in hunk order."""
        return [ln.text for ln in self.lines if not ln.is_removal]

    def invert(self) -> "Hunk":
        return Hunk(
            old_start=self.new_start,
            old_lines=self.new_lines,
            new_start=self.old_start,
            new_lines=self.old_lines,
            lines=[ln.invert() for ln in self.lines],
        )

    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"


@dataclass
class FileDiff:
    """All hunks for one file, with the paths from its ---/+++ headers."""

    old_file: str = ""
    new_file: str = ""
    hunks: List[Hunk] = field(default_factory=list)

    @property
    def is_creation(self) -> bool:
        return self.old_file == DEV_NULL and self.new_file != DEV_NULL

    @property
    def is_deletion(self) -> bool:
        # A deletion carries no line-level semantics.
        return self.new_file == DEV_NULL

    @property
    def target_path(self) -> str:
        """The path this diff is about, preferring the post-image name."""
        if self.new_file and self.new_file != DEV_NULL:
            return self.new_file
        if self.old_file != DEV_NULL:
            return self.old_file
        return ""

    def invert(self) -> "FileDiff":
        return FileDiff(
            old_file=self.new_file,
            new_file=self.old_file,
            hunks=[h.invert() for h in self.hunks],
        )


@dataclass
class Patch:
    """Ordered FileDiffs produced by one parse call."""

    diffs: List[FileDiff] = field(default_factory=list)

    def __iter__(self) -> Iterator[FileDiff]:
        return iter(self.diffs)

    def __len__(self) -> int:
        return len(self.diffs)

    def invert(self) -> "Patch":
        return Patch([d.invert() for d in self.diffs])

    def target_files(self) -> List[str]:
        return [d.target_path for d in self.diffs]

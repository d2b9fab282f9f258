# mend/extract/parser.py
from __future__ import annotations

import logging
import re
from typing import List, Optional

from .._logging import resolve_logger
from ..errors.parse import ParseError
from ..models.diff import DEV_NULL, FileDiff, Hunk, Line, Patch
from ..utils.paths import normalize_header_path
from .sanitize import (
    GIT_HEADER,
    HUNK_HEADER,
    HUNK_LINE_MARKERS,
    NEW_HEADER,
    OLD_HEADER,
    NumberedLine,
    is_git_metadata,
    sanitize_lines,
    structural_kind,
)

__all__ = ["parse_patch", "parse_hunk_header"]

_HUNK_HEADER_RE = re.compile(r"^@@\s*-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s*@@")


def parse_hunk_header(line: str, line_number: int = 0) -> Hunk:
    """Build an empty Hunk from ``@@ -O,L +O2,L2 @@``; omitted counts default to 1."""
    m = _HUNK_HEADER_RE.match(line)
    if not m:
        raise ParseError(line_number, line, "malformed hunk header, expected '@@ -a,b +c,d @@'")
    return Hunk(
        old_start=int(m.group(1)),
        old_lines=int(m.group(2) or "1"),
        new_start=int(m.group(3)),
        new_lines=int(m.group(4) or "1"),
    )


class _PatchBuilder:
    """Accumulates FileDiffs while the parser streams through the lines."""

    def __init__(self, log):
        self.patch = Patch()
        self.current: Optional[FileDiff] = None
        self.hunk: Optional[Hunk] = None
        self.log = log

    def flush(self) -> None:
        fd = self.current
        self.current = None
        self.hunk = None
        if fd is None:
            return
        if not fd.hunks:
            self.log.debug(f"Dropping file diff without hunks ({fd.old_file!r} -> {fd.new_file!r})")
            return
        if fd.new_file and not fd.old_file:
            fd.old_file = DEV_NULL
        elif fd.old_file and not fd.new_file:
            fd.new_file = DEV_NULL
        self.patch.diffs.append(fd)

    def open(self) -> FileDiff:
        self.flush()
        self.current = FileDiff()
        return self.current

    def ensure_open(self) -> FileDiff:
        return self.current if self.current is not None else self.open()

    def set_old_file(self, path: str) -> None:
        fd = self.current
        if fd is None or fd.hunks or fd.old_file:
            fd = self.open()
        fd.old_file = path
        self.hunk = None

    def set_new_file(self, path: str) -> None:
        fd = self.current
        if fd is None or fd.hunks or fd.new_file:
            fd = self.open()
        fd.new_file = path
        self.hunk = None

    def open_hunk(self, hunk: Hunk) -> None:
        self.ensure_open().hunks.append(hunk)
        self.hunk = hunk

    def add_line(self, line: str) -> None:
        if self.hunk is None:
            # Header-less diff: hunk lines with nothing to hang them on.
            self.open_hunk(Hunk())
        marker = line[:1]
        if marker in HUNK_LINE_MARKERS:
            self.hunk.lines.append(Line(marker, line[1:]))
        else:
            self.hunk.lines.append(Line.context(line))


def parse_patch(text: str, *, logger=None, log: bool = False) -> Patch:
    """
    Parse raw (possibly LLM-mangled) diff text into a Patch.

    The text is sanitized first (fences, commentary and missing context
    markers), then streamed line by line. FileDiffs without hunks are dropped.

    Raises:
        ParseError: a hunk header's numbers cannot be read. No partial
            Patch is returned.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    lines: List[NumberedLine] = sanitize_lines(text)
    log.debug(f"Sanitized diff: {len(lines)} lines kept")

    builder = _PatchBuilder(log)
    in_hunk = False
    prev_kind: Optional[str] = None

    for idx, (no, line) in enumerate(lines):
        kind = structural_kind(lines, idx, in_hunk, prev_kind)
        prev_kind = kind

        if kind == GIT_HEADER:
            in_hunk = False
            builder.open()
        elif kind == OLD_HEADER:
            in_hunk = False
            builder.set_old_file(normalize_header_path(line))
        elif kind == NEW_HEADER:
            in_hunk = False
            builder.set_new_file(normalize_header_path(line))
        elif kind == HUNK_HEADER:
            in_hunk = True
            builder.open_hunk(parse_hunk_header(line, no))
        elif is_git_metadata(line):
            continue
        elif builder.hunk is not None or line.startswith(HUNK_LINE_MARKERS):
            builder.add_line(line)

    builder.flush()
    log.debug(
        f"Parsed {len(builder.patch.diffs)} file diff(s) with "
        f"{sum(len(d.hunks) for d in builder.patch.diffs)} hunk(s)"
    )
    return builder.patch

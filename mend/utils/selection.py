# mend/utils/selection.py
from __future__ import annotations

from typing import Iterable, List, Union

import pathspec

from ..errors.selection import NoMatchingChangesError
from ..models.diff import DEV_NULL, Patch


def select_file_diffs(patch: Patch, patterns: Union[str, Iterable[str]]) -> Patch:
    """
    Return a new Patch holding only the FileDiffs whose path matches one of
    the gitignore-style `patterns` (a bare name like ``utils.py`` matches at
    any depth, ``src/**/*.py`` works as in .gitignore).

    Both sides of each FileDiff are checked so deletions and renames can be
    selected by either name. Raises NoMatchingChangesError when nothing matches.
    """
    lines: List[str] = [patterns] if isinstance(patterns, str) else list(patterns)
    spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)

    kept = []
    for fd in patch.diffs:
        names = {p for p in (fd.old_file, fd.new_file) if p and p != DEV_NULL}
        if any(spec.match_file(n) for n in names):
            kept.append(fd)
    if not kept:
        raise NoMatchingChangesError(", ".join(lines))
    return Patch(kept)

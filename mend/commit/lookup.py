# mend/commit/lookup.py
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..utils.text import normalize_line

# (original line index, normalized text) for every non-blank line, in order.
CleanMap = List[Tuple[int, str]]
# normalized text -> original indices where it occurs, in order.
IndexMap = Dict[str, List[int]]


def build_lookup_tables(lines: Sequence[str]) -> Tuple[CleanMap, IndexMap]:
    """
    Precompute the tables every fuzzy tier reads.

    Blank lines are left out of both tables; the original indices kept in
    CleanMap still let a match span be measured against the real line array.
    Build once per file state and reuse across hunks.
    """
    clean_map: CleanMap = []
    index_map: IndexMap = {}
    for i, line in enumerate(lines):
        norm = normalize_line(line)
        if not norm:
            continue
        clean_map.append((i, norm))
        index_map.setdefault(norm, []).append(i)
    return clean_map, index_map

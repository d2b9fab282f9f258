# mend/commit/matcher.py
from __future__ import annotations

import logging
from bisect import bisect_left
from typing import List, Optional, Sequence, Tuple

from .._logging import resolve_logger
from ..models.diff import Hunk
from ..models.match import HunkMatch
from ..utils.text import leading_ws, normalize_line
from .lookup import CleanMap, IndexMap
from .options import (
    DEDUP_BAND,
    DENSITY_WEIGHT,
    INDENT_BONUS,
    LCS_WEIGHT,
    MAX_WINDOW,
    MIN_WINDOW_SLACK,
    PROXIMITY_DISTANCE,
    PROXIMITY_MAX_BONUS,
    STRICT_SCORE,
    WHITESPACE_SCORE,
    WINDOW_SLACK_PER_CHANGE,
    MatchOptions,
)

__all__ = ["locate_hunk", "dedupe_matches", "anchor_score"]


# ---------- scoring helpers ----------


def _density(anchor_count: int, span_length: int) -> float:
    if span_length <= 0:
        return 1.0
    return min(1.0, anchor_count / span_length)


def _lcs_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Length of the longest common subsequence of two line lists."""
    if not a or not b:
        return 0
    prev = [0] * (len(b) + 1)
    for x in a:
        cur = [0]
        for j, y in enumerate(b):
            if x == y:
                cur.append(prev[j] + 1)
            else:
                cur.append(max(prev[j + 1], cur[j]))
        prev = cur
    return prev[-1]


def anchor_score(lcs_score: float, density: float) -> float:
    """Content score of an anchor-heuristic candidate, before any bonus."""
    return LCS_WEIGHT * lcs_score + DENSITY_WEIGHT * density


def _proximity_bonus(start_index: int, hunk: Hunk) -> float:
    # old_start 0 means the header gave no position (or there was no header).
    if hunk.old_start < 1:
        return 0.0
    distance = abs(start_index - (hunk.old_start - 1))
    if distance > PROXIMITY_DISTANCE:
        return 0.0
    return PROXIMITY_MAX_BONUS * (1.0 - distance / PROXIMITY_DISTANCE)


def _with_proximity(matches: List[HunkMatch], hunk: Hunk) -> List[HunkMatch]:
    return [
        HunkMatch(
            start_index=m.start_index,
            matched_length=m.matched_length,
            score=min(1.0, m.score + _proximity_bonus(m.start_index, hunk)),
            density=m.density,
        )
        for m in matches
    ]


def dedupe_matches(matches: List[HunkMatch], band: float = DEDUP_BAND) -> List[HunkMatch]:
    """
    Keep the best candidate per start index, rank them, and drop everything
    scoring below `band` times the best score.

    Ranking: score desc, then density desc, then start index asc.
    """
    best: dict[int, HunkMatch] = {}
    for m in matches:
        cur = best.get(m.start_index)
        if cur is None or (m.score, m.density) > (cur.score, cur.density):
            best[m.start_index] = m
    ranked = sorted(best.values(), key=lambda m: (-m.score, -m.density, m.start_index))
    if not ranked:
        return []
    floor = ranked[0].score * band
    return [m for m in ranked if m.score >= floor]


# ---------- tiers ----------


def _find_strict_match(lines: Sequence[str], anchors: List[str], min_line: int) -> Optional[HunkMatch]:
    n = len(anchors)
    first = anchors[0]
    for i in range(max(0, min_line), len(lines) - n + 1):
        if lines[i] == first and list(lines[i:i + n]) == anchors:
            return HunkMatch(start_index=i, matched_length=n, score=STRICT_SCORE, density=1.0)
    return None


def _blank_edges(anchors: List[str]) -> Tuple[int, int]:
    """Count of blank anchors before the first and after the last non-blank one."""
    blank = [not normalize_line(a) for a in anchors]
    lead = blank.index(False) if False in blank else len(blank)
    trail = blank[::-1].index(False) if False in blank else len(blank)
    return lead, trail


def _find_whitespace_matches(
    lines: Sequence[str],
    clean_map: CleanMap,
    index_map: IndexMap,
    anchors: List[str],
    clean_anchors: List[str],
    min_line: int,
) -> List[HunkMatch]:
    """
    Windows of the non-blank normalized lines equal to the normalized anchors.

    Blank anchors at either edge of the hunk claim the blank file lines next
    to the window, so the applier replaces them instead of duplicating them.
    """
    m = len(clean_anchors)
    lead, trail = _blank_edges(anchors)
    origins = [orig for orig, _ in clean_map]
    found: List[HunkMatch] = []
    for start in index_map.get(clean_anchors[0], []):
        if start < min_line:
            continue
        k = bisect_left(origins, start)
        window = clean_map[k:k + m]
        if len(window) < m:
            break
        if all(text == want for (_, text), want in zip(window, clean_anchors)):
            end = window[-1][0]
            first = start
            while start - first < lead and first - 1 >= min_line and not normalize_line(lines[first - 1]):
                first -= 1
            last = end
            while last - end < trail and last + 1 < len(lines) and not normalize_line(lines[last + 1]):
                last += 1
            length = last - first + 1
            found.append(
                HunkMatch(
                    start_index=first,
                    matched_length=length,
                    score=WHITESPACE_SCORE,
                    density=_density(len(anchors), length),
                )
            )
    return found


def _pick_anchor(anchors: List[str], lo: int, hi: int, fallback: int) -> int:
    """Index of the longest non-blank anchor in anchors[lo:hi], else `fallback`."""
    best = fallback
    best_len = 0
    for i in range(lo, hi):
        size = len(anchors[i].strip())
        if size > best_len:
            best, best_len = i, size
    return best


def _search_window(hunk: Hunk, anchor_count: int) -> int:
    changes = len(hunk.additions) + len(hunk.removals)
    slack = max(MIN_WINDOW_SLACK, WINDOW_SLACK_PER_CHANGE * changes)
    return min(MAX_WINDOW, anchor_count + slack)


def _find_anchor_matches(
    lines: Sequence[str],
    clean_map: CleanMap,
    index_map: IndexMap,
    hunk: Hunk,
    anchors: List[str],
    clean_anchors: List[str],
    min_line: int,
    threshold: float,
    log,
) -> List[HunkMatch]:
    """
    Pair occurrences of a top and a bottom anchor line and score the span
    between them by LCS against the anchors plus compactness.
    """
    n = len(anchors)
    half = n // 2
    top_idx = _pick_anchor(anchors, 0, half, 0)
    bottom_idx = _pick_anchor(anchors, half, n, n - 1)
    top_raw, bottom_raw = anchors[top_idx], anchors[bottom_idx]
    # Anchor lines above the top anchor or below the bottom one still belong to the span.
    top_offset = top_idx
    bottom_offset = n - 1 - bottom_idx
    top_norm = normalize_line(top_raw)
    bottom_norm = normalize_line(bottom_raw)
    top_indent = leading_ws(top_raw)

    window = _search_window(hunk, len(anchors))
    log.debug(f"  top anchor={top_raw!r} bottom anchor={bottom_raw!r} window={window}")

    origins = [orig for orig, _ in clean_map]
    bottoms = index_map.get(bottom_norm, [])
    found: List[HunkMatch] = []

    for top in index_map.get(top_norm, []):
        if top < min_line:
            continue
        lo = bisect_left(bottoms, top + 1)
        for bottom in bottoms[lo:]:
            if bottom - top >= window:
                break
            start = max(min_line, top - top_offset)
            end = min(len(lines) - 1, bottom + bottom_offset)
            span_length = end - start + 1
            density = _density(len(anchors), span_length)
            if anchor_score(1.0, density) < threshold:
                continue

            k0 = bisect_left(origins, start)
            k1 = bisect_left(origins, end + 1)
            span_texts = [text for _, text in clean_map[k0:k1]]
            lcs_score = _lcs_length(clean_anchors, span_texts) / len(clean_anchors)
            score = anchor_score(lcs_score, density)
            if leading_ws(lines[top]) == top_indent:
                score = min(1.0, score + INDENT_BONUS)

            log.debug(
                f"    candidate lines {start + 1}-{end + 1}: lcs={lcs_score:.2f} "
                f"density={density:.2f} score={score:.2f}"
            )
            if score >= threshold:
                found.append(
                    HunkMatch(start_index=start, matched_length=span_length, score=score, density=density)
                )
    return found


# ---------- entry point ----------


def locate_hunk(
    lines: Sequence[str],
    clean_map: CleanMap,
    index_map: IndexMap,
    hunk: Hunk,
    fuzziness: Optional[int] = None,
    min_line: Optional[int] = None,
    threshold: Optional[float] = None,
    *,
    options: Optional[MatchOptions] = None,
    logger=None,
    log: bool = False,
) -> List[HunkMatch]:
    """
    Return ranked candidate locations for `hunk` in `lines`.

    Tiers run in order and stop at the first that finds anything:
      0. strict: anchors appear verbatim and contiguously (score 1.0);
      1. whitespace-insensitive over normalized non-blank lines (score 0.9);
      2. anchor heuristic: top/bottom anchor pairs scored by LCS and density.
    `fuzziness` caps the tier. Explicit keyword values override `options`.

    `clean_map`/`index_map` must come from build_lookup_tables(lines).
    An empty result means no match; several results mean ambiguous.
    """
    opts = options or MatchOptions()
    opts = MatchOptions(
        fuzziness=opts.fuzziness if fuzziness is None else fuzziness,
        match_threshold=opts.match_threshold if threshold is None else threshold,
        min_line=opts.min_line if min_line is None else min_line,
    ).validate()
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    anchors = hunk.anchor_lines
    if not anchors:
        start = min(max(hunk.old_start, opts.min_line), len(lines))
        log.debug(f"Pure insertion, placing at line {start + 1}")
        return [HunkMatch(start_index=start, matched_length=0, score=1.0, density=1.0)]

    log.debug(f"Locating {hunk.header()}:")
    for ln in hunk.lines:
        log.debug(f"  {str(ln)!r}")
    log.debug("Trying strict match...")
    strict = _find_strict_match(lines, anchors, opts.min_line)
    if strict is not None:
        log.debug(f"  strict match at line {strict.start_index + 1}")
        return [strict]
    if opts.fuzziness < 1:
        return []

    clean_anchors = [n for n in (normalize_line(a) for a in anchors) if n]
    if not clean_anchors:
        log.debug("  anchors are all blank, nothing to match on")
        return []

    log.debug("Trying whitespace-insensitive match...")
    found = _find_whitespace_matches(lines, clean_map, index_map, anchors, clean_anchors, opts.min_line)
    if not found and opts.fuzziness >= 2:
        log.debug("Trying anchor-point heuristic match...")
        found = _find_anchor_matches(
            lines, clean_map, index_map, hunk, anchors, clean_anchors,
            opts.min_line, opts.match_threshold, log,
        )

    matches = dedupe_matches(_with_proximity(found, hunk))
    for m in matches:
        log.debug(f"  candidate at line {m.start_index + 1} (len {m.matched_length}) score={m.score:.3f}")
    return matches

# mend/commit/core.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from .._logging import resolve_logger
from ..errors.patch import AmbiguousMatchError, NoMatchError, PatchFailedError
from ..extract.parser import parse_patch
from ..models.diff import FileDiff, Hunk
from ..models.match import HunkMatch
from ..utils.selection import select_file_diffs
from .apply import apply_hunk
from .lookup import build_lookup_tables
from .matcher import locate_hunk
from .options import DEFAULT_FUZZINESS, DEFAULT_MATCH_THRESHOLD, MatchOptions

__all__ = ["apply_file_diff", "patch_text"]

# choose(hunk_index, hunk, matches) -> the match to apply, or None to skip the hunk.
Chooser = Callable[[int, Hunk, List[HunkMatch]], Optional[HunkMatch]]

AMBIGUOUS_POLICIES = ("fail", "first")


def _detect_eol(s: str) -> str:
    if "\r\n" in s:
        return "\r\n"
    if "\r" in s:
        return "\r"
    return "\n"


def _split_content(content: str, eol: str) -> List[str]:
    if not content:
        return []
    lines = content.split(eol)
    if lines[-1] == "":
        lines.pop()
    return lines


def apply_file_diff(
    lines: Sequence[str],
    file_diff: FileDiff,
    *,
    options: Optional[MatchOptions] = None,
    on_ambiguous: str = "fail",
    choose: Optional[Chooser] = None,
    logger=None,
    log: bool = False,
) -> List[str]:
    """
    Apply every hunk of `file_diff` to `lines` and return the new lines.

    Hunks are applied last to first so each search runs against a file whose
    lines above the hunk are still as the diff numbered them.

    For each hunk:
      - exactly one candidate is applied;
      - no candidate asks `choose` (when given) and otherwise raises NoMatchError;
      - several candidates ask `choose` (when given); without it,
        on_ambiguous="first" takes the best-ranked one and "fail" raises
        AmbiguousMatchError.
    `choose` may return None to skip the hunk.
    """
    if on_ambiguous not in AMBIGUOUS_POLICIES:
        raise ValueError(f"on_ambiguous must be one of {AMBIGUOUS_POLICIES}, got {on_ambiguous!r}")
    opts = (options or MatchOptions()).validate()
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    current = list(lines)
    if file_diff.is_deletion:
        log.debug(f"{file_diff.old_file}: whole-file deletion")
        return []

    total = len(file_diff.hunks)
    clean_map, index_map = build_lookup_tables(current)
    for i in range(total - 1, -1, -1):
        hunk = file_diff.hunks[i]
        matches = locate_hunk(
            current, clean_map, index_map, hunk,
            options=opts, logger=log,
        )

        chosen: Optional[HunkMatch]
        if len(matches) == 1:
            chosen = matches[0]
        elif choose is not None:
            chosen = choose(i, hunk, matches)
            if chosen is None:
                log.debug(f"Hunk {i + 1}/{total} skipped by caller")
                continue
        elif not matches:
            raise NoMatchError(i, total, hunk.header())
        elif on_ambiguous == "first":
            chosen = matches[0]
        else:
            raise AmbiguousMatchError(i, total, matches, hunk.header())

        log.debug(
            f"Hunk {i + 1}/{total} matched lines {chosen.start_index + 1}-{chosen.end_index} "
            f"(score {chosen.score:.2f})"
        )
        current = apply_hunk(current, hunk, chosen.start_index, chosen.matched_length)
        clean_map, index_map = build_lookup_tables(current)

    return current


def patch_text(
    content: str,
    diff_text: str,
    *,
    fuzziness: int = DEFAULT_FUZZINESS,
    threshold: float = DEFAULT_MATCH_THRESHOLD,
    target: Optional[str] = None,
    revert: bool = False,
    on_ambiguous: str = "fail",
    choose: Optional[Chooser] = None,
    logger=None,
    log: bool = False,
) -> str:
    """
    Apply a single-file diff to `content` and return the patched text.

    Args:
        content: current file text.
        diff_text: raw diff, fences and commentary allowed.
        fuzziness: 0 exact, 1 whitespace-insensitive, 2 anchor heuristic.
        threshold: minimum anchor-heuristic score.
        target: gitignore-style pattern selecting one FileDiff when the diff
            touches several files.
        revert: un-apply the diff instead.
        on_ambiguous, choose: see apply_file_diff.

    The source's line ending style and trailing newline are preserved.

    Raises:
        ParseError: malformed hunk header.
        PatchFailedError: the diff has no hunks or selects several files.
        NoMatchError / AmbiguousMatchError: a hunk could not be placed.
        NoMatchingChangesError: `target` matched nothing.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    patch = parse_patch(diff_text, logger=log)
    if target is not None:
        patch = select_file_diffs(patch, target)
    if not patch.diffs:
        raise PatchFailedError("Patch contains no valid hunks.")
    if len(patch.diffs) > 1:
        raise PatchFailedError(
            f"Patch touches {len(patch.diffs)} files ({', '.join(patch.target_files())}); pass target= to pick one."
        )
    if revert:
        patch = patch.invert()

    eol = _detect_eol(content)
    had_trailing_nl = content.endswith(("\r\n", "\n", "\r"))
    file_diff = patch.diffs[0]
    if file_diff.is_creation:
        # A created file starts empty regardless of `content`.
        source: List[str] = []
        had_trailing_nl = True
    else:
        source = _split_content(content, eol)

    result = apply_file_diff(
        source,
        file_diff,
        options=MatchOptions(fuzziness=fuzziness, match_threshold=threshold),
        on_ambiguous=on_ambiguous,
        choose=choose,
        logger=log,
    )
    if not result:
        return ""
    return eol.join(result) + (eol if had_trailing_nl else "")

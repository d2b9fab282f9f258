# mend/extract/sanitize.py
"""
Strip chat packaging from LLM-produced diffs before parsing.

Three passes, in order:
  1. cut the text down to the inside of a ```diff / ```patch / ``` fence;
  2. drop everything before the first diff-structural line and any later
     line that is neither a hunk line nor git metadata (commentary);
  3. inside a hunk, give marker-less lines a leading space so they count
     as context (copy-paste diffs often lose it).

Line numbers from the raw input are carried through so parse errors can
point back at what the caller actually supplied.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

NumberedLine = Tuple[int, str]

FENCE_OPENERS = ("```diff", "```patch", "```")
FENCE_CLOSER = "```"

GIT_METADATA_PREFIXES = (
    "index ",
    "new file mode ",
    "deleted file mode ",
    "similarity index ",
    "rename from ",
    "rename to ",
    "Binary files ",
    "\\ No newline at end of file",
)

HUNK_LINE_MARKERS = ("+", "-", " ")

# Kinds returned by structural_kind()
GIT_HEADER = "git"
OLD_HEADER = "old"
NEW_HEADER = "new"
HUNK_HEADER = "hunk"


def split_lines(text: str) -> List[str]:
    """Split on '\\n' only, dropping one trailing '\\r' per line and the empty tail."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def is_git_metadata(line: str) -> bool:
    return line.startswith(GIT_METADATA_PREFIXES)


def structural_kind(
    lines: List[NumberedLine], idx: int, in_hunk: bool, prev_kind: Optional[str]
) -> Optional[str]:
    """
    Classify lines[idx] as a diff-structural line, or return None.

    Inside a hunk a ``---``/``+++`` line is ambiguous: ``-- comment`` removed from
    SQL or Lua reads as ``--- comment``. There it only counts as a file header
    when it pairs with its partner line (``---`` followed by ``+++``).
    """
    line = lines[idx][1]
    if line.startswith("diff --git "):
        return GIT_HEADER
    if line.startswith("@@"):
        return HUNK_HEADER
    if line.startswith("---"):
        if not in_hunk:
            return OLD_HEADER
        nxt = lines[idx + 1][1] if idx + 1 < len(lines) else ""
        return OLD_HEADER if nxt.startswith("+++") else None
    if line.startswith("+++"):
        if not in_hunk or prev_kind == OLD_HEADER:
            return NEW_HEADER
        return None
    return None


def _strip_fences(numbered: List[NumberedLine]) -> List[NumberedLine]:
    opener = None
    for i, (_, line) in enumerate(numbered):
        if line.strip() in FENCE_OPENERS:
            opener = i
            break
    if opener is None:
        return numbered

    body = numbered[opener + 1:]
    for j in range(len(body) - 1, -1, -1):
        if body[j][1].strip() == FENCE_CLOSER:
            return body[:j]
    return body


def sanitize_lines(text: str) -> List[NumberedLine]:
    """Return the kept lines of `text` as (1-based line number, line) pairs."""
    numbered = _strip_fences(list(enumerate(split_lines(text), start=1)))

    out: List[NumberedLine] = []
    # Blank lines inside a hunk only survive if more hunk lines follow them.
    pending_blanks: List[NumberedLine] = []
    seen_structural = False
    in_hunk = False
    prev_kind: Optional[str] = None

    for idx, (no, line) in enumerate(numbered):
        kind = structural_kind(numbered, idx, in_hunk, prev_kind)
        prev_kind = kind
        if kind is not None:
            seen_structural = True
            in_hunk = kind == HUNK_HEADER
            pending_blanks = []
            out.append((no, line))
            continue
        if not seen_structural:
            continue

        if is_git_metadata(line):
            out.append((no, line))
            continue

        if line.startswith(HUNK_LINE_MARKERS):
            if in_hunk:
                out.extend(pending_blanks)
            pending_blanks = []
            out.append((no, line))
            continue

        if in_hunk:
            if not line.strip():
                pending_blanks.append((no, " "))
                continue
            out.extend(pending_blanks)
            pending_blanks = []
            out.append((no, " " + line))
            continue
        # Anything else is commentary.

    return out


def sanitize_diff(text: str) -> str:
    """Sanitized diff text, one kept line per output line."""
    return "\n".join(line for _, line in sanitize_lines(text))

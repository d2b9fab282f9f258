# mend/utils/paths.py
from ..models.diff import DEV_NULL

_DEV_NULL_SPELLINGS = {"/dev/null", "dev/null", "a/dev/null", "b/dev/null", "a//dev/null", "b//dev/null"}


def normalize_header_path(header_line: str) -> str:
    """
    Extract the file path from a ``---``/``+++`` header line.

    Takes the trailing whitespace-delimited token so variants like
    ``--- a/x.py   2024-01-01 10:00`` or ``+++ new x.py`` still resolve, strips a
    leading ``a/``/``b/`` and folds every /dev/null spelling into DEV_NULL.
    Returns "" when the header carries no path at all.
    """
    body = header_line[3:].strip()
    if not body:
        return ""
    # A tab separates the path from a timestamp in classic unified diffs.
    if "\t" in body:
        body = body.split("\t", 1)[0].strip()
        tokens = body.split()
        path = tokens[-1] if tokens else ""
    else:
        path = body.split()[-1]

    if path in _DEV_NULL_SPELLINGS:
        return DEV_NULL
    if path.startswith(("a/", "b/")):
        path = path[2:]
    return path

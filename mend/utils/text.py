import re

# A word run, or any single character that is neither word nor whitespace.
_TOKEN_RE = re.compile(r"\w+|[^\w\s]")
_LEADING_WS_RE = re.compile(r"^[\t ]*")


def normalize_line(line: str) -> str:
    """
    Canonical token form of a line for whitespace-insensitive comparison.

    Whitespace is dropped entirely, identifier runs stay whole and every other
    character becomes its own token; tokens are joined by single spaces.
    ``foo( a, b )`` and ``foo(a,b)`` both become ``foo ( a , b )``.
    A blank line normalizes to ``""``.
    """
    return " ".join(_TOKEN_RE.findall(line))


def leading_ws(s: str) -> str:
    """Return the exact leading whitespace (tabs/spaces)."""
    m = _LEADING_WS_RE.match(s)
    return m.group(0) if m else ""

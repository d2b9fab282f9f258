# conftest.py - shared pytest helpers
import pytest

from mend.commit.lookup import build_lookup_tables
from mend.models.diff import Hunk, Line


def to_lines(text: str) -> list:
    return text.split("\n")


@pytest.fixture
def tables():
    """Build (lines, clean_map, index_map) from a text blob."""
    def _build(text: str):
        lines = to_lines(text)
        clean_map, index_map = build_lookup_tables(lines)
        return lines, clean_map, index_map
    return _build


@pytest.fixture
def line_two_hunk():
    """one / -two / +two new / three, as a @@ -1,3 +1,3 @@ hunk."""
    return Hunk(
        old_start=1,
        old_lines=3,
        new_start=1,
        new_lines=3,
        lines=[
            Line.context("line one"),
            Line.removal("line two"),
            Line.addition("line two new"),
            Line.context("line three"),
        ],
    )

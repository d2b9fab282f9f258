from mend.commit.apply import apply_hunk
from mend.models.diff import Hunk, Line


def test_apply_replaces_matched_span(line_two_hunk):
    lines = ["line one", "line two", "line three"]
    assert apply_hunk(lines, line_two_hunk, 0, 3) == ["line one", "line two new", "line three"]


def test_apply_is_pure(line_two_hunk):
    lines = ["line one", "line two", "line three"]
    apply_hunk(lines, line_two_hunk, 0, 3)
    assert lines == ["line one", "line two", "line three"]


def test_apply_discards_whole_span_including_blanks(line_two_hunk):
    lines = ["header", "line one", "", "line two", "line three", "tail"]
    out = apply_hunk(lines, line_two_hunk, 1, 4)
    assert out == ["header", "line one", "line two new", "line three", "tail"]


def test_pure_insertion_with_zero_length():
    hunk = Hunk(2, 0, 3, 1, [Line.addition("c")])
    assert apply_hunk(["a", "b", "d"], hunk, 2, 0) == ["a", "b", "c", "d"]


def test_insertion_past_end_appends():
    hunk = Hunk(9, 0, 10, 1, [Line.addition("z")])
    assert apply_hunk(["a"], hunk, 9, 0) == ["a", "z"]

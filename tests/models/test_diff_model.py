from mend.models.diff import ADDITION, CONTEXT, DEV_NULL, REMOVAL, FileDiff, Hunk, Line, Patch
from mend.models.match import HunkMatch


def _hunk():
    return Hunk(
        old_start=3,
        old_lines=2,
        new_start=5,
        new_lines=3,
        lines=[Line.context("a"), Line.removal("b"), Line.addition("c"), Line.addition("d")],
    )


def test_line_kinds_and_str():
    assert Line.context("x").kind == CONTEXT
    assert Line.addition("x").kind == ADDITION
    assert Line.removal("x").kind == REMOVAL
    assert str(Line.removal("x")) == "-x"
    assert Line.removal("x").is_anchor
    assert not Line.addition("x").is_anchor


def test_line_invert_swaps_addition_and_removal():
    assert Line.addition("x").invert() == Line.removal("x")
    assert Line.removal("x").invert() == Line.addition("x")
    assert Line.context("x").invert() == Line.context("x")


def test_hunk_views():
    h = _hunk()
    assert h.anchor_lines == ["a", "b"]
    assert h.additions == ["c", "d"]
    assert h.removals == ["b"]
    assert h.replacement_lines == ["a", "c", "d"]
    assert h.header() == "@@ -3,2 +5,3 @@"


def test_hunk_invert_swaps_header_numbers_and_kinds():
    inv = _hunk().invert()
    assert (inv.old_start, inv.old_lines, inv.new_start, inv.new_lines) == (5, 3, 3, 2)
    assert [str(ln) for ln in inv.lines] == [" a", "+b", "-c", "-d"]


def test_file_diff_invert_swaps_paths():
    fd = FileDiff(old_file="old.py", new_file="new.py", hunks=[_hunk()])
    inv = fd.invert()
    assert inv.old_file == "new.py"
    assert inv.new_file == "old.py"
    assert inv.hunks[0].lines[1] == Line.addition("b")


def test_patch_double_invert_round_trips():
    patch = Patch([
        FileDiff("a.py", "a.py", [_hunk()]),
        FileDiff(DEV_NULL, "new.txt", [Hunk(0, 0, 1, 1, [Line.addition("hi")])]),
    ])
    assert patch.invert().invert() == patch
    assert patch.invert() != patch


def test_invert_does_not_mutate_original():
    patch = Patch([FileDiff("a.py", "a.py", [_hunk()])])
    patch.invert()
    assert patch.diffs[0].hunks[0].old_start == 3
    assert patch.diffs[0].hunks[0].lines[1] == Line.removal("b")


def test_creation_and_deletion_flags():
    created = FileDiff(DEV_NULL, "new.txt")
    deleted = FileDiff("gone.txt", DEV_NULL)
    modified = FileDiff("x.txt", "x.txt")
    assert created.is_creation and not created.is_deletion
    assert deleted.is_deletion and not deleted.is_creation
    assert not modified.is_creation and not modified.is_deletion
    assert created.target_path == "new.txt"
    assert deleted.target_path == "gone.txt"
    assert created.invert().is_deletion


def test_patch_target_files_and_iteration():
    patch = Patch([FileDiff("a.py", "b.py"), FileDiff("gone.txt", DEV_NULL), FileDiff()])
    assert patch.target_files() == ["b.py", "gone.txt", ""]
    assert len(patch) == 3
    assert [d.old_file for d in patch] == ["a.py", "gone.txt", ""]


def test_hunk_match_end_index():
    m = HunkMatch(start_index=4, matched_length=3, score=0.9, density=1.0)
    assert m.end_index == 7

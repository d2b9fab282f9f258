import pytest

from mend.errors import NoMatchingChangesError
from mend.models.diff import DEV_NULL, FileDiff, Hunk, Line, Patch
from mend.utils.selection import select_file_diffs


def _patch():
    hunk = Hunk(1, 1, 1, 1, [Line.removal("a"), Line.addition("b")])
    return Patch([
        FileDiff("src/app/main.py", "src/app/main.py", [hunk]),
        FileDiff("README.md", "README.md", [hunk]),
        FileDiff("old/legacy.py", DEV_NULL, [hunk]),
    ])


def test_select_by_bare_name_matches_any_depth():
    picked = select_file_diffs(_patch(), "main.py")
    assert picked.target_files() == ["src/app/main.py"]


def test_select_by_glob_list():
    picked = select_file_diffs(_patch(), ["*.py"])
    assert picked.target_files() == ["src/app/main.py", "old/legacy.py"]


def test_select_deleted_file_by_old_name():
    picked = select_file_diffs(_patch(), "old/legacy.py")
    assert len(picked) == 1
    assert picked.diffs[0].is_deletion


def test_select_returns_new_patch():
    patch = _patch()
    select_file_diffs(patch, "README.md")
    assert len(patch) == 3


def test_select_nothing_raises():
    with pytest.raises(NoMatchingChangesError) as exc:
        select_file_diffs(_patch(), "missing.rs")
    assert "missing.rs" in str(exc.value)

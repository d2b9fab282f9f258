import pytest

from mend.models.diff import DEV_NULL
from mend.utils.paths import normalize_header_path


@pytest.mark.parametrize(
    "header, expected",
    [
        ("--- a/src/utils.rs", "src/utils.rs"),
        ("+++ b/src/utils.rs", "src/utils.rs"),
        ("--- src/utils.rs", "src/utils.rs"),
        ("--- /dev/null", DEV_NULL),
        ("+++ b/dev/null", DEV_NULL),
        ("--- a/x.py\t2024-01-01 10:00:00", "x.py"),
        ("--- original Personne.java.old", "Personne.java.old"),
        ("+++", ""),
    ],
)
def test_normalize_header_path(header, expected):
    assert normalize_header_path(header) == expected

import pytest

from mend.utils.text import leading_ws, normalize_line


@pytest.mark.parametrize(
    "line, expected",
    [
        ("foo(a,b)", "foo ( a , b )"),
        ("foo( a, b )", "foo ( a , b )"),
        ("    return x+1;", "return x + 1 ;"),
        ("my_var = 42", "my_var = 42"),
        ("a==b", "a = = b"),
        ("", ""),
        ("   \t  ", ""),
    ],
)
def test_normalize_line(line, expected):
    assert normalize_line(line) == expected


def test_whitespace_between_tokens_is_irrelevant():
    base = "if (x > 0) { return foo(bar, baz); }"
    spaced = "  if(x>0){return   foo( bar ,baz ) ;}\t"
    assert normalize_line(base) == normalize_line(spaced)


def test_identifier_boundaries_still_matter():
    assert normalize_line("foo bar") != normalize_line("foobar")


def test_leading_ws():
    assert leading_ws("\t  x = 1") == "\t  "
    assert leading_ws("x") == ""
    assert leading_ws("") == ""

import logging

from mend import parse_patch
from mend._logging import NoopLogger, resolve_logger


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    # Should not raise:
    lg.debug("hello")
    lg.info("world")


def test_resolve_logger_enabled_creates_logger(caplog):
    with caplog.at_level(logging.INFO):
        lg = resolve_logger(enabled=True, name="mend.test")
        lg.info("test message")
    assert any("test message" in rec.message for rec in caplog.records)


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("x")
    assert resolve_logger(logger=custom) is custom


def test_library_is_silent_by_default(caplog):
    with caplog.at_level(logging.DEBUG):
        parse_patch("@@ -1 +1 @@\n-a\n+b\n")
    assert not [r for r in caplog.records if r.name.startswith("mend")]


def test_library_logs_when_enabled(caplog):
    with caplog.at_level(logging.DEBUG, logger="mend"):
        parse_patch("@@ -1 +1 @@\n-a\n+b\n", log=True)
    assert any("Parsed 1 file diff" in rec.message for rec in caplog.records)


def test_locate_hunk_logs_hunk_header_and_lines(caplog):
    from mend import build_lookup_tables, locate_hunk

    hunk = parse_patch("@@ -1 +1 @@\n-a\n+b\n").diffs[0].hunks[0]
    lines = ["a"]
    cm, im = build_lookup_tables(lines)
    with caplog.at_level(logging.DEBUG, logger="mend"):
        locate_hunk(lines, cm, im, hunk, log=True)
    messages = [rec.message for rec in caplog.records]
    assert "Locating @@ -1,1 +1,1 @@:" in messages
    assert "  '-a'" in messages

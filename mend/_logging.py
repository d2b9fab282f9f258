"""
Opt-in logging for the matching engine.

Usage in library code:
    from mend._logging import resolve_logger

    def locate_hunk(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("trying strict match")  # no-op unless enabled or logger passed

Nothing in the library prints. Callers either hand in their own logger
or flip ``log=True``; by default every call goes to a NoopLogger.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_default_handler(lg: logging.Logger) -> None:
    # Bubble up to the root so pytest's caplog sees the records.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "mend")
        lg.setLevel(level)
        _ensure_default_handler(lg)
        return lg
    return NoopLogger()

from .base import MendError
from .parse import ParseError
from .patch import AmbiguousMatchError, NoMatchError, PatchFailedError
from .selection import NoMatchingChangesError

__all__ = [
    "MendError",
    "ParseError",
    "PatchFailedError",
    "NoMatchError",
    "AmbiguousMatchError",
    "NoMatchingChangesError",
]

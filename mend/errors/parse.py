from .base import MendError


class ParseError(MendError):
    """
    Raised when diff text cannot be turned into a Patch.

    Attributes:
        line_number: 1-based line number in the raw input text, before sanitization.
        line: the raw offending line.
        message: human readable reason.
    """

    def __init__(self, line_number: int, line: str, message: str):
        self.line_number = line_number
        self.line = line
        self.message = message
        super().__init__(f"line {line_number}: {message}\n  {line}")

from .base import MendError


class NoMatchingChangesError(MendError):
    """Selecting a patch by target file left nothing to apply."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"The diff contains no changes for the specified file: {target}")

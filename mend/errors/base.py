class MendError(Exception):
    """Base class for every error raised by mend."""

# errors
# (exceptions raised to the caller)
#


class MempassError(Exception):
    pass


class OptionsError(MempassError, ValueError):

    """Invalid configuration, detected before any word is processed."""


class SourceError(MempassError):

    """Word source failure (unreadable or unusable word list)."""

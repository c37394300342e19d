"""Exception types raised by the name_ml package."""
from pathlib import Path
from typing import Any, Optional


class NameMLError(Exception):
    """Base class for all name_ml errors."""


class LexiconLoadError(NameMLError):
    """A lexicon resource could not be read.

    The lexicon store recovers from this error by degrading the affected
    lexicon; it never reaches callers of classification queries.

    Attributes:
        path: Path of the resource that failed to load
    """

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        message = f"Could not load lexicon resource {self.path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class UnsupportedLanguageError(NameMLError, ValueError):
    """A language-dependent operation was called with an unknown language.

    Attributes:
        value: The rejected language value
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unsupported language: {value!r}")

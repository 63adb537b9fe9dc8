"""Error types raised by the Spendbook core."""

from pathlib import Path
from typing import List, Optional


class SpendbookError(Exception):
    """Base class for all Spendbook errors."""


class ValidationError(SpendbookError, ValueError):
    """Raised when input does not satisfy the invariants of an expense."""


class PreconditionError(SpendbookError, ValueError):
    """Raised when a statistic is requested that is undefined for empty input."""


class LoadError(SpendbookError):
    """Raised when the persisted expenses document cannot be read back.

    The data in the document is treated as lost. ``expenses`` holds the
    empty fallback the caller should continue with.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
        self.expenses: List = []


class PersistError(SpendbookError):
    """Raised when the expenses document cannot be written.

    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path

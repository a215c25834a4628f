"""Custom exceptions for the reload pipeline."""

from typing import Optional


class ReloadError(Exception):
    """Base class for failures that abort a single reload tick.

    Attributes:
        path: Backing file path involved, if known
        message: Human-readable error message
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        self.message = message
        if path is not None:
            super().__init__(f"{message}: {path}")
        else:
            super().__init__(message)


class IoOpenFailedError(ReloadError):
    """Raised when the backing file cannot be opened for reading."""

    def __init__(self, path: str, message: str = "Failed to open file for reading"):
        super().__init__(message, path)


class IoReadFailedError(ReloadError):
    """Raised when the backing file cannot be read completely.

    Covers a failed size query, an OS error while reading and a short read
    (fewer bytes than the size reported by the filesystem).
    """

    def __init__(self, path: str, message: str = "Failed to read file"):
        super().__init__(message, path)


class HandleUnavailableError(ReloadError):
    """Raised when the data source is missing or no longer available."""

    def __init__(self, message: str = "Data source is not available"):
        super().__init__(message)


class SyncFailedError(ReloadError):
    """Raised when a data source operation fails while resyncing its buffer."""

    def __init__(self, path: Optional[str], cause: BaseException):
        self.cause = cause
        super().__init__(f"Failed to reload file ({type(cause).__name__}: {cause})", path)

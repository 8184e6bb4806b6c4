"""Exceptions raised by storable operations.

Every failure is surfaced to the caller immediately. "Nothing to do" outcomes
(loading a missing file, removing an absent backup) are plain return values
and never raise.
"""

from pathlib import Path


class StoreError(Exception):
    """Base exception for storage failures."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class DirectoryCreationFailed(StoreError):
    """Raised when a target directory could not be created."""


class EncodeFailed(StoreError):
    """Raised when a codec rejects a value."""


class DecodeFailed(StoreError):
    """Raised when stored bytes are malformed or do not fit the target type."""


class WriteFailed(StoreError):
    """Raised when writing a data file fails."""


class ReadFailed(StoreError):
    """Raised when reading a data file fails."""


class CopyFailed(StoreError):
    """Raised when copying a data file to its backup fails."""


class DeleteFailed(StoreError):
    """Raised when deleting a data or backup file fails."""

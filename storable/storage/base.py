"""Abstract base class for value stores.

A store persists one value per resolved file. Files are located by the
value's type name, a file format and optional per-call store options.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TypeVar

from storable.models.model_codecs import CodecOverrides
from storable.models.model_options import FileFormat, StoreOptions

T = TypeVar("T")

Subject = Any  # a type, an instance of it, or a type name


class Store(ABC):
    """Abstract base class for store implementations.

    Provides the six file lifecycle operations. "Nothing to do" outcomes are
    reported through return values; failures raise ``StoreError`` subclasses.
    """

    @abstractmethod
    def path_for(self, subject: Subject, fmt: FileFormat, options: StoreOptions | None = None) -> Path:
        """Resolve the data file path for a type, an instance or a type name."""
        ...

    @abstractmethod
    def backup_path_for(
        self, subject: Subject, fmt: FileFormat, options: StoreOptions | None = None
    ) -> Path:
        """Resolve the backup file path for a type, an instance or a type name."""
        ...

    @abstractmethod
    def save(
        self,
        value: Any,
        fmt: FileFormat,
        options: StoreOptions | None = None,
        coders: CodecOverrides | None = None,
        *,
        type_name: str | None = None,
    ) -> bool:
        """Encode a value and write it to its resolved path.

        Args:
            value: Value to store.
            fmt: File format to encode with.
            options: Path overrides. None means default options.
            coders: Replacement JSON/property list coders.
            type_name: File name stem to use instead of the value's type name.

        Returns:
            True once the file has been written.
        """
        ...

    @abstractmethod
    def load(
        self,
        target: type[T],
        fmt: FileFormat,
        options: StoreOptions | None = None,
        coders: CodecOverrides | None = None,
        *,
        type_name: str | None = None,
    ) -> T | None:
        """Read and decode a previously saved value.

        Args:
            target: Type to decode into.
            fmt: File format the value was saved with.
            options: Path overrides used when saving.
            coders: Replacement JSON/property list coders.
            type_name: File name stem to use instead of the target's name.

        Returns:
            Decoded value, or None if no file exists.
        """
        ...

    @abstractmethod
    def remove(self, subject: Subject, fmt: FileFormat, options: StoreOptions | None = None) -> bool:
        """Delete a data file.

        Returns:
            True if a file was removed, False if none existed.
        """
        ...

    @abstractmethod
    def exists(self, subject: Subject, fmt: FileFormat, options: StoreOptions | None = None) -> bool:
        """Check whether a data file exists."""
        ...

    @abstractmethod
    def backup(self, subject: Subject, fmt: FileFormat, options: StoreOptions | None = None) -> bool:
        """Copy a data file to its backup path, replacing any previous backup.

        Returns:
            True if the backup was written, False if the data file is missing.
        """
        ...

    @abstractmethod
    def remove_backup(
        self, subject: Subject, fmt: FileFormat, options: StoreOptions | None = None
    ) -> bool:
        """Delete the backup of a data file.

        Returns:
            True if a backup was removed, False if none existed.
        """
        ...

"""File-based store for arbitrary serializable values.

Each value lives in its own file, located by ``PathResolver``:

    <base dir>/
    ├── Record.json              # default options, JSON
    ├── Record.json.bak          # backup of the above
    └── users/
        ├── acct.plist           # sub_directory="users", custom_filename="acct"
        └── acct.plist.bak
"""

import logging
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

from storable.consts import DEFAULT_APP_NAME
from storable.errors import CopyFailed, DeleteFailed, ReadFailed, WriteFailed
from storable.models.model_codecs import CodecOverrides
from storable.models.model_options import BaseDirectory, FileFormat, StoreOptions
from storable.storage import codecs
from storable.storage.base import Store, Subject
from storable.storage.bound_store import BoundStore
from storable.storage.path_resolver import PathResolver, backup_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


def type_name_of(subject: Subject) -> str:
    """Get the default file name stem for a type, an instance or a name."""
    if isinstance(subject, str):
        return subject
    if isinstance(subject, type):
        return subject.__name__
    name = getattr(subject, "__name__", None)
    if isinstance(name, str):
        # Generic aliases such as list[Record]
        return name
    return type(subject).__name__


class FileStore(Store):
    """Stores values as JSON, property list or archive files.

    Only ``save`` creates missing directories. Every other operation works on
    whatever is on disk and never changes the directory layout.
    """

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        roots: Mapping[BaseDirectory, Path | str] | None = None,
    ):
        """Initialize FileStore.

        Args:
            app_name: Application name used for platform directories.
            roots: Explicit base directories, e.g. a temporary directory in tests.
        """
        self.resolver = PathResolver(app_name=app_name, roots=roots)

    # === PATHS ===

    def path_for(
        self,
        subject: Subject,
        fmt: FileFormat,
        options: StoreOptions | None = None,
    ) -> Path:
        """Resolve the data file path for a subject without touching the disk."""
        return self.resolver.resolve(fmt, type_name_of(subject), options)

    def backup_path_for(
        self,
        subject: Subject,
        fmt: FileFormat,
        options: StoreOptions | None = None,
    ) -> Path:
        """Resolve the backup file path for a subject without touching the disk."""
        return backup_path(self.path_for(subject, fmt, options))

    # === STORE OPERATIONS ===

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

        Any existing file is overwritten.

        Raises:
            EncodeFailed: If the codec rejects the value.
            DirectoryCreationFailed: If the target directory cannot be created.
            WriteFailed: If writing fails, including when the directory is
                missing and ``create_sub_dir`` is False.
        """
        data = codecs.encode(value, fmt, coders)
        path = self.resolver.resolve(
            fmt, type_name or type(value).__name__, options, create_dirs=True
        )

        try:
            path.write_bytes(data)
        except OSError as e:
            raise WriteFailed(f"Failed to write {path}: {e}", path) from e

        logger.debug(f"Saved {type(value).__name__} to {path} ({len(data)} bytes)")
        return True

    def load(
        self,
        target: type[T],
        fmt: FileFormat,
        options: StoreOptions | None = None,
        coders: CodecOverrides | None = None,
        *,
        type_name: str | None = None,
    ) -> T | None:
        """Read and decode a value into ``target``.

        Returns:
            Decoded value, or None if the file does not exist.

        Raises:
            ReadFailed: If the file exists but cannot be read.
            DecodeFailed: If the contents do not decode into ``target``.
        """
        path = self.resolver.resolve(fmt, type_name or type_name_of(target), options)
        if not path.exists():
            logger.debug(f"No data file at {path}")
            return None

        try:
            data = path.read_bytes()
        except OSError as e:
            raise ReadFailed(f"Failed to read {path}: {e}", path) from e

        return codecs.decode(data, target, fmt, coders, path=path)

    def remove(
        self,
        subject: Subject,
        fmt: FileFormat,
        options: StoreOptions | None = None,
    ) -> bool:
        """Delete a data file.

        Returns:
            True if the file was deleted, False if it did not exist.
        """
        return self._delete(self.path_for(subject, fmt, options))

    def exists(
        self,
        subject: Subject,
        fmt: FileFormat,
        options: StoreOptions | None = None,
    ) -> bool:
        """Check if a data file exists."""
        return self.path_for(subject, fmt, options).is_file()

    def backup(
        self,
        subject: Subject,
        fmt: FileFormat,
        options: StoreOptions | None = None,
    ) -> bool:
        """Copy a data file to ``<file>.bak``, replacing any previous backup.

        Returns:
            True if the backup was written, False if the data file is missing.
        """
        path = self.path_for(subject, fmt, options)
        if not path.exists():
            return False

        target = backup_path(path)
        try:
            shutil.copy2(path, target)
        except OSError as e:
            raise CopyFailed(f"Failed to back up {path} to {target}: {e}", target) from e

        logger.debug(f"Backed up {path} to {target}")
        return True

    def remove_backup(
        self,
        subject: Subject,
        fmt: FileFormat,
        options: StoreOptions | None = None,
    ) -> bool:
        """Delete the backup of a data file.

        Returns:
            True if the backup was deleted, False if it did not exist.
        """
        return self._delete(self.backup_path_for(subject, fmt, options))

    # === BINDING ===

    def bind(
        self,
        target: type[T],
        fmt: FileFormat,
        options: StoreOptions | None = None,
        coders: CodecOverrides | None = None,
        *,
        type_name: str | None = None,
    ) -> BoundStore[T]:
        """Get a handle that fixes the type, format and options of a data file."""
        return BoundStore(self, target, fmt, options, coders, type_name=type_name)

    def _delete(self, path: Path) -> bool:
        if not path.exists():
            return False

        try:
            path.unlink()
        except OSError as e:
            raise DeleteFailed(f"Failed to delete {path}: {e}", path) from e

        logger.debug(f"Deleted {path}")
        return True


def main() -> None:
    """Example usage of FileStore."""
    import tempfile

    from pydantic import BaseModel

    logging.basicConfig(level=logging.DEBUG)

    class Record(BaseModel):
        username: str
        age: int

    with tempfile.TemporaryDirectory() as tmpdir:
        store = FileStore(roots={BaseDirectory.USER_DATA: tmpdir})
        record = Record(username="alice", age=30)

        print("=== FileStore Example ===\n")

        print("1. Saving as JSON...")
        store.save(record, FileFormat.JSON)
        print(f"   Saved to: {store.path_for(Record, FileFormat.JSON)}")
        print(f"   Loaded: {store.load(Record, FileFormat.JSON)}")

        print("\n2. Saving as property list in a subdirectory...")
        options = StoreOptions(sub_directory="users", custom_filename="acct")
        store.save(record, FileFormat.PLIST, options)
        print(f"   Saved to: {store.path_for(Record, FileFormat.PLIST, options)}")

        print("\n3. Backing up...")
        print(f"   backup: {store.backup(Record, FileFormat.PLIST, options)}")
        print(f"   remove_backup: {store.remove_backup(Record, FileFormat.PLIST, options)}")
        print(f"   remove_backup again: {store.remove_backup(Record, FileFormat.PLIST, options)}")

        print("\n4. Removing...")
        print(f"   remove: {store.remove(Record, FileFormat.JSON)}")
        print(f"   exists after remove: {store.exists(Record, FileFormat.JSON)}")


if __name__ == "__main__":
    main()

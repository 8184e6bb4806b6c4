"""storable: save, load and back up serializable values as files."""

from storable.errors import (
    CopyFailed,
    DecodeFailed,
    DeleteFailed,
    DirectoryCreationFailed,
    EncodeFailed,
    ReadFailed,
    StoreError,
    WriteFailed,
)
from storable.models import (
    BaseDirectory,
    CodecOverrides,
    FileFormat,
    JsonDecoder,
    JsonEncoder,
    PlistDecoder,
    PlistEncoder,
    StoreOptions,
)
from storable.storage import BoundStore, FileStore, PathResolver, Store

__all__ = [
    # Stores
    "BoundStore",
    "FileStore",
    "PathResolver",
    "Store",
    # Models
    "BaseDirectory",
    "CodecOverrides",
    "FileFormat",
    "JsonDecoder",
    "JsonEncoder",
    "PlistDecoder",
    "PlistEncoder",
    "StoreOptions",
    # Errors
    "CopyFailed",
    "DecodeFailed",
    "DeleteFailed",
    "DirectoryCreationFailed",
    "EncodeFailed",
    "ReadFailed",
    "StoreError",
    "WriteFailed",
]

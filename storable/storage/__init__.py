"""Storage backends for persisting values to files.

This module provides:
- Store: Abstract base class for value stores
- FileStore: File-based store for JSON, property list and archive files
- BoundStore: Store handle fixed to one type, format and options
- PathResolver: Data file path resolution
"""

from storable.storage.base import Store
from storable.storage.bound_store import BoundStore
from storable.storage.file_store import FileStore
from storable.storage.path_resolver import PathResolver, backup_path

__all__ = [
    "BoundStore",
    "FileStore",
    "PathResolver",
    "Store",
    "backup_path",
]

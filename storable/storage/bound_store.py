"""A store handle bound to one type, format and set of options."""

from pathlib import Path
from typing import Any, Generic, TypeVar

from storable.models.model_codecs import CodecOverrides
from storable.models.model_options import FileFormat, StoreOptions
from storable.storage.base import Store

T = TypeVar("T")


class BoundStore(Generic[T]):
    """Runs store operations for a fixed target type.

    Usage:
        settings = store.bind(Settings, FileFormat.JSON)
        settings.save(Settings(theme="dark"))
        current = settings.load()
    """

    def __init__(
        self,
        store: Store,
        target: type[T],
        fmt: FileFormat,
        options: StoreOptions | None = None,
        coders: CodecOverrides | None = None,
        *,
        type_name: str | None = None,
    ):
        self.store = store
        self.target = target
        self.fmt = fmt
        self.options = options
        self.coders = coders
        self.type_name = type_name

    @property
    def _subject(self) -> Any:
        return self.type_name or self.target

    @property
    def path(self) -> Path:
        return self.store.path_for(self._subject, self.fmt, self.options)

    @property
    def backup_path(self) -> Path:
        return self.store.backup_path_for(self._subject, self.fmt, self.options)

    def save(self, value: T) -> bool:
        name = self.type_name or getattr(self.target, "__name__", None)
        return self.store.save(value, self.fmt, self.options, self.coders, type_name=name)

    def load(self) -> T | None:
        return self.store.load(
            self.target, self.fmt, self.options, self.coders, type_name=self.type_name
        )

    def remove(self) -> bool:
        return self.store.remove(self._subject, self.fmt, self.options)

    def exists(self) -> bool:
        return self.store.exists(self._subject, self.fmt, self.options)

    def backup(self) -> bool:
        return self.store.backup(self._subject, self.fmt, self.options)

    def remove_backup(self) -> bool:
        return self.store.remove_backup(self._subject, self.fmt, self.options)

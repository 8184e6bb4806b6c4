"""Formats, base directories and per-call store options."""

from enum import Enum
from pathlib import PurePath, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileFormat(str, Enum):
    """Supported file formats.

    The format fixes both the codec and the default file extension.
    """

    JSON = "json"
    PLIST = "plist"  # structured binary property list
    ARCHIVE = "archive"  # pickled object graph

    @property
    def default_extension(self) -> str:
        """Extension used when no custom extension is given."""
        return self.value


class BaseDirectory(str, Enum):
    """Standard platform storage locations."""

    USER_DATA = "user-data"
    CACHE = "cache"


class StoreOptions(BaseModel):
    """Per-call overrides for where a data file lives.

    Passing ``None`` wherever options are accepted is equivalent to
    ``StoreOptions()``.
    """

    model_config = ConfigDict(frozen=True)

    directory: BaseDirectory = Field(
        default=BaseDirectory.USER_DATA, description="Base directory to store files in"
    )
    sub_directory: str | None = Field(
        default=None, description="One or more path components appended to the base directory"
    )
    custom_filename: str | None = Field(
        default=None, description="File name to use instead of the value's type name"
    )
    custom_extension: str | None = Field(
        default=None, description="Extension to use instead of the format default"
    )
    create_sub_dir: bool = Field(
        default=True, description="Create missing directories when saving"
    )

    @field_validator("sub_directory")
    @classmethod
    def stays_under_base_directory(cls, value: str | None) -> str | None:
        """Validate that the subdirectory cannot leave its base directory."""
        if value is None:
            return value
        if PurePath(value).anchor or PureWindowsPath(value).anchor:
            msg = f"Subdirectory must be relative, got {value!r}"
            raise ValueError(msg)
        if ".." in PureWindowsPath(value).parts:
            msg = f"Subdirectory must not contain '..', got {value!r}"
            raise ValueError(msg)
        return value

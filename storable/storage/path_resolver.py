"""Resolution of data file locations.

A resolved path is ``<base dir>/<sub directory>/<file name>.<extension>``:

- base dir: explicit root, else environment override, else platformdirs
- file name: ``custom_filename`` or the value's type name
- extension: ``custom_extension`` or the format's default extension

Paths are recomputed on every call.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from platformdirs import PlatformDirs

from storable.consts import (
    BACKUP_SUFFIX,
    DEFAULT_APP_NAME,
    ENV_CACHE_DIR,
    ENV_USER_DATA_DIR,
)
from storable.errors import DirectoryCreationFailed
from storable.models.model_options import BaseDirectory, FileFormat, StoreOptions

logger = logging.getLogger(__name__)

_ENV_OVERRIDES = {
    BaseDirectory.USER_DATA: ENV_USER_DATA_DIR,
    BaseDirectory.CACHE: ENV_CACHE_DIR,
}

_DEFAULT_OPTIONS = StoreOptions()


def backup_path(path: Path) -> Path:
    """Return the backup location for a data file (``<path>.bak``)."""
    return path.with_name(f"{path.name}.{BACKUP_SUFFIX}")


class PathResolver:
    """Computes absolute data file paths from formats and store options."""

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        roots: Mapping[BaseDirectory, Path | str] | None = None,
    ):
        """Initialize PathResolver.

        Args:
            app_name: Application name used for platform directories.
            roots: Explicit base directories. Take precedence over environment
                overrides and platform defaults.
        """
        self.app_name = app_name
        self._roots = {
            BaseDirectory(k): Path(v).expanduser().absolute() for k, v in (roots or {}).items()
        }

    def base_dir(self, directory: BaseDirectory) -> Path:
        """Get the absolute path of a base directory."""
        if directory in self._roots:
            return self._roots[directory]

        override = os.getenv(_ENV_OVERRIDES[directory])
        if override:
            return Path(override).expanduser().absolute()

        dirs = PlatformDirs(appname=self.app_name, appauthor=False)
        if directory is BaseDirectory.CACHE:
            return Path(dirs.user_cache_dir)
        return Path(dirs.user_data_dir)

    def directory_for(self, options: StoreOptions | None = None) -> Path:
        """Get the directory a data file lives in, without creating it."""
        if options is None:
            options = _DEFAULT_OPTIONS
        directory = self.base_dir(options.directory)
        if options.sub_directory:
            directory = directory / options.sub_directory
        return directory

    def resolve(
        self,
        fmt: FileFormat,
        type_name: str,
        options: StoreOptions | None = None,
        *,
        create_dirs: bool = False,
    ) -> Path:
        """Resolve the absolute path of a data file.

        Args:
            fmt: File format, which supplies the default extension.
            type_name: Default file name stem.
            options: Path overrides. None is the same as StoreOptions().
            create_dirs: Create a missing directory when the options allow it.

        Returns:
            Absolute path of the data file. The file itself need not exist.

        Raises:
            DirectoryCreationFailed: If the directory could not be created.
        """
        if options is None:
            options = _DEFAULT_OPTIONS
        directory = self.directory_for(options)

        if create_dirs and options.create_sub_dir and not directory.is_dir():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DirectoryCreationFailed(
                    f"Failed to create directory {directory}: {e}", directory
                ) from e
            logger.debug(f"Created directory {directory}")

        file_name = options.custom_filename or type_name
        extension = options.custom_extension or fmt.default_extension
        return directory / f"{file_name}.{extension}"

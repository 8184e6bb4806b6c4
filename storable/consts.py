"""Configuration constants for storable."""

# platformdirs application name used to locate base directories
DEFAULT_APP_NAME = "storable"

# Appended to a resolved path to form its backup path: data.json -> data.json.bak
BACKUP_SUFFIX = "bak"

# Environment overrides for base directories (checked at call time)
ENV_USER_DATA_DIR = "STORABLE_USER_DATA_DIR"
ENV_CACHE_DIR = "STORABLE_CACHE_DIR"

# Default JSON output formatting
JSON_DEFAULT_INDENT = 2

# Pickle protocol used by the archive format
ARCHIVE_PROTOCOL = 5

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

"""Shared constants for linkmirror dot-directories and defaults."""

LINKMIRROR_HOME_EXT = ".linkmirror"  # user-level state/config directory suffix

LINKMIRROR_HOME_DISPLAY = f"~/{LINKMIRROR_HOME_EXT}"  # user-readable path hint

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "linkmirror.log"

# Display width constant - standardize to 80 characters max
MAX_DISPLAY_WIDTH = 80

DEFAULT_FILE_REGEX = r"(?i).*\.md"

DEFAULT_GIT_TIMEOUT_SECS = 30.0

DEFAULT_PARALLELISM = 4

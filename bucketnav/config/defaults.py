"""
Defaults and Constants

Values shared by every layer of the shell. The path delimiter in particular
must come from here so the resolver, the storage backends and each command
agree on how prefixes are split and terminated.
"""

PATH_DELIMITER = "/"
"""Separator used to split user paths and to terminate non-empty prefixes"""

CURRENT_SEGMENT = "."
PARENT_SEGMENT = ".."

DEFAULT_PROMPT = "{path}> "
DEFAULT_SPINNER_TEXT = "Working..."
DEFAULT_LIST_PAGE_SIZE = 1000

CONFIG_FILE_ENV = "BUCKETNAV_CONFIG_FILE"
DEFAULT_CONFIG_PATH = "~/.bucketnav/config.toml"

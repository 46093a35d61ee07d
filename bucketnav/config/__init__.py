"""
Configuration System

Manages configuration for bucketnav with a layered approach.

Configuration Priority (highest to lowest):
    1. Programmatic (passed to NavConfig()) and config file values
       (~/.bucketnav/config.toml or BUCKETNAV_CONFIG_FILE)
    2. Environment variables (BUCKETNAV_* prefix, standard AWS_* keys)
    3. Built-in defaults

Modules:
    settings: NavConfig class
    defaults: Default values and constants (PATH_DELIMITER)
"""

from bucketnav.config.defaults import PATH_DELIMITER
from bucketnav.config.settings import NavConfig

__all__ = ["NavConfig", "PATH_DELIMITER"]

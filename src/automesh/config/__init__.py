"""
Configuration model and loader.

This package provides the command tree entities, their structural
validation, and the YAML loader that resolves imports across files.
"""

from automesh.config.loader import (
    ConfigLoader,
    default_search_dirs,
    find_default_config,
    load_config,
)
from automesh.config.models import Arg, Command, Config, Flag
from automesh.config.validation import (
    validate_arg,
    validate_command,
    validate_config,
    validate_flag,
)

__all__ = [
    "Arg",
    "Flag",
    "Command",
    "Config",
    "ConfigLoader",
    "load_config",
    "find_default_config",
    "default_search_dirs",
    "validate_arg",
    "validate_flag",
    "validate_command",
    "validate_config",
]

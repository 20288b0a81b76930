"""
automesh exception classes.

This package provides all exception types used by the configuration loader
and the alias resolver for consistent error handling and reporting.
"""

from automesh.exceptions.core import (
    AliasError,
    AutomeshError,
    CircularImportError,
    ConfigError,
    ConfigFileNotFoundError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    MissingFlagValueError,
    MissingRequiredArgError,
    MissingRequiredFlagError,
    TooManyArgsError,
    UnknownAliasError,
    UnknownFlagError,
)

__all__ = [
    "AutomeshError",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "CircularImportError",
    "ConfigValidationError",
    "ConfigNotFoundError",
    "AliasError",
    "UnknownAliasError",
    "MissingRequiredArgError",
    "MissingRequiredFlagError",
    "MissingFlagValueError",
    "UnknownFlagError",
    "TooManyArgsError",
]

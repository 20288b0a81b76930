"""
Exception classes for automesh configuration loading and alias resolution.

This module defines two independent taxonomies: load-time errors raised while
reading and validating the command tree, and resolve-time errors raised while
matching an inbound message against that tree.
"""

from pathlib import Path


class AutomeshError(Exception):
    """Base exception for all automesh errors."""

    pass


class ConfigError(AutomeshError):
    """Base exception for errors raised while loading a configuration."""

    pass


class ConfigFileNotFoundError(ConfigError):
    """Raised when a configuration or imported file cannot be read."""

    def __init__(self, path: Path, cause: OSError):
        """
        Initialize the exception.

        Params:
            path: The file that could not be opened
            cause: The underlying I/O error
        """
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read file '{path}': {cause}")


class ConfigParseError(ConfigError):
    """Raised when a file is not valid YAML or does not have the expected shape."""

    def __init__(self, path: Path, cause: Exception):
        """
        Initialize the exception.

        Params:
            path: The file that failed to parse
            cause: The underlying YAML or model error
        """
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse YAML in '{path}': {cause}")


class CircularImportError(ConfigError):
    """Raised when a file is opened a second time during one load."""

    def __init__(self, path: Path):
        """
        Initialize the exception.

        Params:
            path: Canonical path of the file whose re-open was detected
        """
        self.path = path
        super().__init__(f"Circular import detected: '{path}'")


class ConfigValidationError(ConfigError):
    """Raised when a loaded command tree breaks a structural rule."""

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: Description of the broken rule
        """
        self.message = message
        super().__init__(f"Validation failed: '{message}'")


class ConfigNotFoundError(ConfigError):
    """Raised when no default configuration file exists in any search location."""

    def __init__(self, candidates: list[Path]):
        """
        Initialize the exception.

        Params:
            candidates: Every path that was searched, in search order
        """
        self.candidates = list(candidates)
        searched = ", ".join(str(candidate) for candidate in self.candidates)
        super().__init__(f"No config file found. Searched: {searched}")


class AliasError(AutomeshError):
    """Base exception for errors raised while resolving an inbound message."""

    pass


class UnknownAliasError(AliasError):
    """Raised when no command matches the input."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command: {name}")


class MissingRequiredArgError(AliasError):
    """Raised when a positional argument without a default is not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required argument: {name}")


class MissingRequiredFlagError(AliasError):
    """Raised when a required flag without a default is not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required flag: {name}")


class MissingFlagValueError(AliasError):
    """Raised when a value flag is the last token."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Flag {name} requires a value")


class UnknownFlagError(AliasError):
    """Raised when a dash-prefixed token matches no declared flag."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown flag: {name}")


class TooManyArgsError(AliasError):
    """Raised when more positional tokens are given than arguments declared."""

    def __init__(self, expected: int):
        self.expected = expected
        super().__init__(f"Too many arguments (expected {expected})")

"""
YAML configuration loader with cross-file imports.

A configuration document declares device parameters and a ``commands``
sequence. Each entry in a ``commands`` sequence, at any depth, is either an
inline command mapping or an ``{import: <relative path>}`` reference to
another file holding a single command or a sequence of entries. Imports are
resolved depth-first relative to the importing file's directory.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from automesh.config.models import Command, Config
from automesh.config.validation import validate_command, validate_config
from automesh.exceptions import (
    CircularImportError,
    ConfigError,
    ConfigFileNotFoundError,
    ConfigNotFoundError,
    ConfigParseError,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES = ("config.yaml", "config.yml")


class ConfigLoader:
    """
    Loads one configuration document and everything it imports.

    Every file opened is recorded by canonical (symlink-resolved) path in
    ``loaded_files``. Paths are never removed during the loader's lifetime, so
    opening any file twice, whether through a cycle or a repeated import, is
    reported as a circular import. Use one loader per top-level load.
    """

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)
        self.loaded_files: set[Path] = set()

    def load(self, config_path: str | Path) -> Config:
        """
        Load a top-level configuration document.

        Params:
            config_path: File name, relative to ``base_path``

        Returns:
            The materialized configuration, with all imports resolved

        Raises:
            ConfigFileNotFoundError: If the document or an import cannot be read
            ConfigParseError: If a file is not valid YAML or has the wrong shape
            CircularImportError: If a file is opened twice
            ConfigValidationError: If a command breaks a structural rule
        """
        path = self.base_path / config_path
        raw = self._read_yaml(path)
        if not isinstance(raw, dict):
            raise ConfigParseError(
                path, TypeError("top-level document must be a mapping")
            )

        data = dict(raw)
        if "commands" in data:
            data["commands"] = self._resolve_entries(
                self._as_entries(data["commands"], path), path
            )

        try:
            return Config.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(path, e) from e

    def _open(self, path: Path) -> None:
        try:
            canonical_path = path.resolve(strict=True)
        except OSError as e:
            raise ConfigFileNotFoundError(path, e) from e

        if canonical_path in self.loaded_files:
            raise CircularImportError(canonical_path)
        self.loaded_files.add(canonical_path)

    def _read_yaml(self, path: Path) -> Any:
        self._open(path)
        logger.debug("Reading config file %s", path)

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFileNotFoundError(path, e) from e

        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParseError(path, e) from e

    def _as_entries(self, value: Any, path: Path) -> list[Any]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ConfigParseError(
                path, TypeError(f"'commands' must be a sequence, got {value!r}")
            )
        return value

    def _resolve_entries(self, entries: list[Any], current_file: Path) -> list[Command]:
        """
        Materialize a sequence of entries declared in ``current_file``.

        Imported commands are spliced in at the position of their import
        entry, so declaration order is preserved.

        Params:
            entries: Raw YAML entries (import references or command mappings)
            current_file: File the entries were read from

        Returns:
            Built and validated commands in declaration order
        """
        resolved: list[Command] = []
        parent_dir = current_file.parent

        for entry in entries:
            if isinstance(entry, dict) and "import" in entry:
                import_path = parent_dir / str(entry["import"])
                resolved.extend(self._load_command_file(import_path))
            else:
                resolved.append(self._build_command(entry, current_file))

        return resolved

    def _build_command(self, entry: Any, current_file: Path) -> Command:
        if not isinstance(entry, dict):
            raise ConfigParseError(
                current_file,
                TypeError(f"expected a command mapping or an import, got {entry!r}"),
            )

        data = dict(entry)
        if "commands" in data:
            data["commands"] = self._resolve_entries(
                self._as_entries(data["commands"], current_file), current_file
            )

        try:
            command = Command.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(current_file, e) from e

        validate_command(command)
        return command

    def _load_command_file(self, path: Path) -> list[Command]:
        raw = self._read_yaml(path)

        # A lone mapping is one entry: "one file = one subcommand"
        if isinstance(raw, dict):
            return self._resolve_entries([raw], path)
        if isinstance(raw, list):
            return self._resolve_entries(raw, path)

        raise ConfigParseError(
            path, TypeError("expected a command mapping or a sequence of entries")
        )


def load_config(path: str | Path) -> Config:
    """
    Load and validate the configuration at ``path``.

    The path is tried with a ``.yaml`` extension first and a ``.yml``
    extension second, each with its own loader. When both fail, the ``.yml``
    error is raised unless the ``.yml`` file does not exist at all, in which
    case the ``.yaml`` error is the informative one and is raised instead.

    Params:
        path: Configuration path; any existing extension is replaced

    Returns:
        The validated configuration

    Raises:
        ConfigError: The error of the attempt that explains the failure
    """
    path = Path(path)
    yaml_path = path.with_suffix(".yaml")

    try:
        config = ConfigLoader(yaml_path.parent).load(yaml_path.name)
    except ConfigError as yaml_error:
        yml_path = path.with_suffix(".yml")
        logger.debug("Could not load %s (%s), trying %s", yaml_path, yaml_error, yml_path)
        try:
            config = ConfigLoader(yml_path.parent).load(yml_path.name)
        except ConfigFileNotFoundError as yml_error:
            if yml_error.path == yml_path:
                raise yaml_error from None
            raise

    validate_config(config)
    logger.debug("Loaded config with %d top-level commands", len(config.commands))
    return config


def default_search_dirs() -> list[Path]:
    """Directories searched for a default config, in priority order."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return [Path.cwd(), base / "automesh"]


def find_default_config(search_dirs: list[str | Path] | None = None) -> Path:
    """
    Find the first existing default configuration file.

    Params:
        search_dirs: Directories to search; defaults to ``default_search_dirs()``

    Returns:
        Path of the first ``config.yaml`` or ``config.yml`` found

    Raises:
        ConfigNotFoundError: Listing every candidate path that was checked
    """
    dirs = default_search_dirs() if search_dirs is None else [Path(d) for d in search_dirs]
    candidates = [directory / name for directory in dirs for name in DEFAULT_CONFIG_NAMES]

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(candidates)

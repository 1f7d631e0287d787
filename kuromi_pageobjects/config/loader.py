"""
Configuration loading for kuromi-pageobjects.

Options are merged from, lowest to highest priority: defaults, a config
file (JSON, YAML or TOML), environment variables and programmatic overrides.
The merged result becomes the process-wide current options.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .defaults import (
    CONFIG_SECTION,
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import PageObjectOptions

logger = logging.getLogger(__name__)

_current: PageObjectOptions = PageObjectOptions()


def _load_json(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        import yaml
    except ImportError:
        raise ConfigurationError(
            "PyYAML is required to load YAML config files. "
            "Install with: pip install pyyaml"
        )

    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load page object options from file based on extension.

    A top-level ``pageobjects`` section is used when present, so the options
    can live inside a larger shared config file.

    Args:
        path: Path to configuration file

    Returns:
        Options dictionary

    Raises:
        ConfigurationError: If the file is missing, unreadable or of an
            unsupported format
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            data = _load_json(path)
        elif suffix in (".yaml", ".yml"):
            data = _load_yaml(path)
        elif suffix == ".toml":
            data = _load_toml(path)
        else:
            raise ConfigurationError(f"Unsupported configuration format: {suffix}")
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")

    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_SECTION}' section in {path} must be a mapping")
    return section


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Find configuration file in search paths.

    Args:
        filename: Base filename without extension
        search_paths: Directories to search
        extensions: File extensions to try

    Returns:
        Path to config file or None if not found
    """
    if search_paths is None:
        search_paths = DEFAULT_CONFIG_SEARCH_PATHS

    if extensions is None:
        extensions = DEFAULT_CONFIG_EXTENSIONS

    for search_path in search_paths:
        search_dir = Path(search_path).expanduser()

        for ext in extensions:
            config_path = search_dir / f"{filename}{ext}"
            if config_path.exists():
                return config_path

    return None


def _build(data: dict[str, Any]) -> PageObjectOptions:
    try:
        return PageObjectOptions.from_dict(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid page object options: {e}") from e


def load_options(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    auto_find: bool = False,
) -> PageObjectOptions:
    """Load options from all sources and make them current.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values

    Args:
        config_file: Explicit path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to read environment variables
        auto_find: Search the default locations when no file is given

    Returns:
        The loaded options
    """
    global _current

    merged: dict[str, Any] = {}

    if config_file is None and auto_find:
        config_file = find_config_file()

    if config_file is not None:
        merged.update(load_file(config_file))
        logger.debug(f"Loaded page object options from {config_file}")

    if load_env:
        merged.update(load_env_config())

    if overrides:
        merged.update(overrides)

    _current = _build(merged)
    return _current


def get_options() -> PageObjectOptions:
    """Return the current process-wide options."""
    return _current


def configure(**overrides: Any) -> PageObjectOptions:
    """Apply ``overrides`` on top of the current options.

    Raises:
        ConfigurationError: If an override is unknown or invalid
    """
    global _current

    try:
        _current = _current.merge(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid page object options: {e}") from e
    return _current


def reset_options() -> PageObjectOptions:
    """Restore default options."""
    global _current

    _current = PageObjectOptions()
    return _current

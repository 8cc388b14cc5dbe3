#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the wikirender CLI.

A configuration file holds default command line values and renderer options.
Top-level keys apply to every dialect; a table named after a dialect applies
only to that dialect::

    to = "redmine"
    default_image_format = "svg"

    [redmine]
    normalize_image_paths = false

    [tiddlywiki]
    diagram_languages = ["mermaid", "graphviz"]

"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from wikirender.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from wikirender.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WIKIRENDER_CONFIG"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.wikirender]`` table from a pyproject.toml file.

    Returns an empty dict if the table does not exist.

    Raises
    ------
    ConfigurationError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {pyproject_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading {pyproject_path}: {e}", original_error=e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for the dedicated config files in
    :data:`~wikirender.constants.CONFIG_FILENAMES` order, then for a
    ``pyproject.toml`` that has a ``[tool.wikirender]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigurationError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}")

    ext = config_path.suffix.lower()
    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigurationError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Invalid config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {config_path}: {e}", original_error=e) from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. ``WIKIRENDER_CONFIG`` environment variable
    3. Auto-discovered config file in the current directory or its parents

    Returns
    -------
    dict
        Loaded configuration (empty if none was found)

    """
    if explicit_path:
        return load_config_file(explicit_path)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = find_config_in_parents()
    if discovered_path:
        return load_config_file(discovered_path)
    return {}


def options_from_config(config: Dict[str, Any], dialect_name: str, option_names: set[str]) -> Dict[str, Any]:
    """Collect renderer option values for one dialect from a configuration.

    Top-level values are read first and the dialect's own table overrides
    them. Keys that are not option fields are ignored.

    Examples
    --------
        >>> config = {"toc_sentinel": "[[toc]]", "redmine": {"toc_sentinel": "%toc%"}}
        >>> options_from_config(config, "redmine", {"toc_sentinel"})
        {'toc_sentinel': '%toc%'}

    """
    values = {key: value for key, value in config.items() if key in option_names}

    section = config.get(dialect_name, {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section [{dialect_name}] must be a table, got {type(section).__name__}")
    values.update({key: value for key, value in section.items() if key in option_names})

    ignored = [key for key in section if key not in option_names]
    if ignored:
        logger.warning(f"Ignoring unknown {dialect_name} options in config: {', '.join(ignored)}")
    return values


__all__ = [
    "CONFIG_ENV_VAR",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "options_from_config",
]

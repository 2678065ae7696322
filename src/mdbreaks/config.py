#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for mdbreaks.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML, or JSON format, and merging configurations with
proper priority handling.

Recognized keys
---------------
ignore : list of str
    Node types whose text keeps its line endings
break_type : str
    Type of the inserted break nodes
indent : int
    JSON indentation used by the CLI
transforms : list of str
    Additional registered transforms applied after ``breaks``

"""

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

from mdbreaks.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from mdbreaks.exceptions import ConfigError
from mdbreaks.options import BreaksOptions

logger = logging.getLogger(__name__)

OPTION_KEYS = ("ignore", "break_type")
KNOWN_KEYS = OPTION_KEYS + ("indent", "transforms")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.mdbreaks] section from a pyproject.toml file.

    Returns
    -------
    dict
        Section contents, or an empty dict if the section is absent

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading pyproject.toml {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from ``start_dir`` to the filesystem root,
    checking each directory for ``.mdbreaks.toml``, ``.mdbreaks.yaml``,
    ``.mdbreaks.yml``, ``.mdbreaks.json``, then a ``pyproject.toml`` with a
    ``[tool.mdbreaks]`` section.

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
            except ConfigError:
                # Invalid pyproject.toml, keep searching
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches parent directories first (see `find_config_in_parents`), then
    the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON, or pyproject.toml file.

    Auto-detects the format from the file name and extension.

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)

    raise ConfigError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path))


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading TOML config {config_path}: {e}", str(config_path), e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading JSON config {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(f"JSON config file must contain an object, got {type(config).__name__}", str(config_path))
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading YAML config {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"YAML config file must contain a mapping, got {type(config).__name__}", str(config_path))
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"ignore": ["code"], "indent": 2}, {"indent": 4})
    {'ignore': ['code'], 'indent': 4}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config`` flag)
    2. Environment variable config path (``MDBREAKS_CONFIG``)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    ConfigError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug(f"Using discovered config file: {discovered_path}")
        return load_config_file(discovered_path)

    return {}


def options_from_config(config: Dict[str, Any], base: Optional[BreaksOptions] = None) -> BreaksOptions:
    """Build `BreaksOptions` from a configuration dictionary.

    Unknown keys are logged and ignored.

    Raises
    ------
    ConfigError
        If a recognized key has an invalid value

    """
    for key in config:
        if key not in KNOWN_KEYS:
            logger.warning(f"Ignoring unknown configuration key: {key}")

    updates = {key: config[key] for key in OPTION_KEYS if key in config}
    if "ignore" in updates and isinstance(updates["ignore"], list):
        updates["ignore"] = tuple(updates["ignore"])

    try:
        return (base or BreaksOptions()).create_updated(**updates)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}", original_error=e) from e


def transforms_from_config(config: Dict[str, Any]) -> list[str]:
    """Return the ``transforms`` config value as a list of transform names.

    Raises
    ------
    ConfigError
        If the value is not a list of non-empty strings

    """
    names = config.get("transforms", [])
    if not isinstance(names, list) or not all(isinstance(name, str) and name for name in names):
        raise ConfigError(f"Invalid configuration: 'transforms' must be a list of transform names, got {names!r}")
    return list(names)


def indent_from_config(config: Dict[str, Any], default: Optional[int]) -> Optional[int]:
    """Return the ``indent`` config value, or ``default`` when it is not set.

    Raises
    ------
    ConfigError
        If the value is neither an integer nor None

    """
    if "indent" not in config:
        return default
    indent = config["indent"]
    # bool is an int subclass
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int)):
        raise ConfigError(f"Invalid configuration: 'indent' must be an integer, got {indent!r}")
    return indent

"""
structmeta YAML Configuration

Loading and defaults for the optional .structmeta.yaml project file.
"""

import os
from pathlib import Path

import yaml

from structmeta.exceptions import ConfigurationError

CONFIG_FILENAME = ".structmeta.yaml"

def get_config_path() -> Path:
    """
    Get the path to the YAML config file.

    STRUCTMETA_CONFIG wins; otherwise .structmeta.yaml in the working directory.
    """
    env_path = os.environ.get("STRUCTMETA_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path.cwd() / CONFIG_FILENAME


def load_yaml_config(config_path: Path | None = None) -> dict:
    """
    Load configuration from the YAML config file.

    Args:
        config_path: Explicit path; defaults to get_config_path()

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    if config_path is None:
        config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        loaded = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse {config_path.name}: {e}", {"path": str(config_path)}
        ) from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            f"{config_path.name} must contain a mapping at the root",
            {"path": str(config_path)},
        )
    return loaded

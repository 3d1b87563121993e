"""
structmeta Runtime Configuration

Runtime defaults and configuration merging logic.
Combines defaults, YAML config, and environment variables.
Command-line options are applied on top by the CLI.
"""

import os
from pathlib import Path
from typing import Optional

from structmeta.configs.constants import DEFAULT_INDENT, DEFAULT_KIND, DEFAULT_OUTPUT_EXT
from structmeta.configs.yaml_config import load_yaml_config
from structmeta.exceptions import ConfigurationError

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "kind": DEFAULT_KIND,
    "debug": False,
    "log_file": None,
    "output_ext": DEFAULT_OUTPUT_EXT,
    "indent": DEFAULT_INDENT,
}

_STRING_KEYS = ("kind", "log_file", "output_ext", "indent")


def get_full_config(config_path: Optional[Path] = None) -> dict:
    """
    Get full configuration merged from defaults, YAML, and environment.

    Priority (highest wins):
    1. Environment variables
    2. YAML config file
    3. DEFAULT_CONFIG

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigurationError: If a YAML value has the wrong type
    """
    config = dict(DEFAULT_CONFIG)

    yaml_config = load_yaml_config(config_path)
    for key, value in yaml_config.items():
        if key not in config:
            continue
        if key == "debug" and not isinstance(value, bool):
            raise ConfigurationError("debug must be a boolean", {"value": value})
        if key in _STRING_KEYS and value is not None and not isinstance(value, str):
            raise ConfigurationError(f"{key} must be a string", {"value": value})
        config[key] = value

    # Environment overrides
    if os.environ.get("STRUCTMETA_KIND"):
        config["kind"] = os.environ["STRUCTMETA_KIND"]

    if os.environ.get("STRUCTMETA_DEBUG"):
        config["debug"] = os.environ["STRUCTMETA_DEBUG"].lower() in ("true", "1", "yes")

    if os.environ.get("STRUCTMETA_LOG_FILE"):
        config["log_file"] = os.environ["STRUCTMETA_LOG_FILE"]

    return config

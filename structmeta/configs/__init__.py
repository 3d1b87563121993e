"""
structmeta Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from structmeta.configs.logging import get_logger, setup_logging

# Constants
from structmeta.configs.constants import (
    DEFAULT_KIND,
    INVALID_TYPE,
    SRC_KIND,
    STDOUT_SENTINEL,
)

# YAML config
from structmeta.configs.yaml_config import (
    get_config_path,
    load_yaml_config,
)

# Runtime
from structmeta.configs.runtime import DEFAULT_CONFIG, get_full_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Constants
    "DEFAULT_KIND",
    "INVALID_TYPE",
    "SRC_KIND",
    "STDOUT_SENTINEL",
    # YAML config
    "get_config_path",
    "load_yaml_config",
    # Runtime
    "DEFAULT_CONFIG",
    "get_full_config",
]

"""
UIKB Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from uikb.configs.logging import get_logger, setup_logging

# Constants
from uikb.configs.constants import (
    AI_HINT_PLACEHOLDER,
    COMPONENT_SUFFIX,
    DEFAULT_MODEL,
    DOC_SUFFIXES,
    STORIES_SUFFIX,
    TIMEOUTS,
    get_timeout,
)

# YAML config
from uikb.configs.yaml_config import (
    get_config_path,
    load_yaml_config,
)

# Paths
from uikb.configs.paths import KBPaths, get_paths

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Constants
    "AI_HINT_PLACEHOLDER",
    "COMPONENT_SUFFIX",
    "DEFAULT_MODEL",
    "DOC_SUFFIXES",
    "STORIES_SUFFIX",
    "TIMEOUTS",
    "get_timeout",
    # YAML config
    "get_config_path",
    "load_yaml_config",
    # Paths
    "KBPaths",
    "get_paths",
]

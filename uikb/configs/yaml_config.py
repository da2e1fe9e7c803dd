"""
UIKB YAML Configuration

Optional uikb.yaml in the working directory. Environment variables always
take precedence over values found here.
"""

from pathlib import Path
from typing import Any, Optional

import yaml

from uikb.configs.logging import get_logger
from uikb.exceptions import ConfigurationError

logger = get_logger("configs.yaml")

CONFIG_FILENAME = "uikb.yaml"


def get_config_path(cwd: Optional[Path] = None) -> Path:
    """Get the path to uikb.yaml in the working directory."""
    return (cwd or Path.cwd()) / CONFIG_FILENAME


def load_yaml_config(path: Optional[Path] = None) -> dict[str, Any]:
    """
    Load uikb.yaml.

    Args:
        path: Explicit config path (defaults to ./uikb.yaml)

    Returns:
        Parsed config dict, empty when the file does not exist

    Raises:
        ConfigurationError: If the file exists but is not a YAML mapping
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return {}

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{config_path} must contain a mapping",
            {"type": type(data).__name__},
        )

    logger.debug(f"Loaded config from {config_path}")
    return data


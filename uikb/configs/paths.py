"""
UIKB Paths

Resolves the component library roots, the knowledge base output location and
the path the relay reads from. Resolution order per value: environment
variable, then uikb.yaml, then the default derived from the working directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from uikb.configs.constants import DEFAULT_OUTPUT_FILENAME
from uikb.configs.yaml_config import load_yaml_config

DEFAULT_BASE_PATH = Path("..") / "uniframe" / "projects" / "uniframe"


@dataclass(frozen=True)
class KBPaths:
    """Resolved locations used by a build and by the relay."""

    base_path: Path
    stories_path: Path
    components_path: Path
    output_path: Path
    knowledge_base_path: Path


def _resolve(
    env_var: str,
    config: dict[str, Any],
    key: str,
    default: Optional[Path],
    cwd: Path,
) -> Optional[Path]:
    """Pick env var, then config key, then default; relative paths anchor to cwd."""
    raw = os.environ.get(env_var) or config.get(key)
    if raw:
        path = Path(str(raw)).expanduser()
    elif default is not None:
        path = default
    else:
        return None

    if not path.is_absolute():
        path = cwd / path
    return path.resolve()


def get_paths(
    config: Optional[dict[str, Any]] = None,
    cwd: Optional[Path] = None,
) -> KBPaths:
    """
    Resolve all paths from environment and working-directory context.

    Environment:
        UIKB_BASE_PATH: Component library root
        UIKB_STORIES_PATH: Stories root (default: <base>/stories)
        UIKB_COMPONENTS_PATH: Components root (default: <base>/components)
        UIKB_OUTPUT_PATH: Knowledge base output (default: ./knowledge_base.json)
        UIKB_KNOWLEDGE_BASE_PATH: File read by the relay (default: output path)

    Args:
        config: Parsed uikb.yaml (loaded from cwd when None)
        cwd: Working directory (defaults to the process cwd)

    Returns:
        KBPaths with absolute paths
    """
    cwd = cwd or Path.cwd()
    if config is None:
        config = load_yaml_config(cwd / "uikb.yaml")

    base_path = _resolve("UIKB_BASE_PATH", config, "base_path", DEFAULT_BASE_PATH, cwd)
    stories_path = _resolve(
        "UIKB_STORIES_PATH", config, "stories_path", base_path / "stories", cwd
    )
    components_path = _resolve(
        "UIKB_COMPONENTS_PATH", config, "components_path", base_path / "components", cwd
    )
    output_path = _resolve(
        "UIKB_OUTPUT_PATH", config, "output_path", Path(DEFAULT_OUTPUT_FILENAME), cwd
    )
    knowledge_base_path = _resolve(
        "UIKB_KNOWLEDGE_BASE_PATH", config, "knowledge_base_path", output_path, cwd
    )

    return KBPaths(
        base_path=base_path,
        stories_path=stories_path,
        components_path=components_path,
        output_path=output_path,
        knowledge_base_path=knowledge_base_path,
    )

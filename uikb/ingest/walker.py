"""
Stories Walker

Discovers Storybook example files and pairs each with the component
definition it documents.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Generator

from uikb.configs.constants import COMPONENT_SUFFIX, IGNORED_DIRS, STORIES_SUFFIX
from uikb.configs.logging import get_logger
from uikb.exceptions import DiscoveryError

logger = get_logger("ingest.walker")


@dataclass(frozen=True)
class DiscoveryUnit:
    """A stories file plus the component locations derived from its path."""

    base_name: str  # Stories filename minus ".stories.ts"
    stories_file: Path
    component_dir: Path
    component_file: Path


def walk_stories(stories_root: Path) -> Generator[Path, None, None]:
    """
    Walk a stories tree yielding `*.stories.ts` files in sorted order.

    Ignored and hidden directories are never descended into.
    """
    for dirpath, dirnames, filenames in os.walk(stories_root):
        # Filter out ignored directories (in-place modification)
        dirnames[:] = sorted(
            d for d in dirnames if d not in IGNORED_DIRS and not d.startswith(".")
        )

        for filename in sorted(filenames):
            if filename.startswith("."):
                continue
            if filename.endswith(STORIES_SUFFIX) and len(filename) > len(STORIES_SUFFIX):
                yield Path(dirpath) / filename


def discover_units(stories_root: str | Path, components_root: str | Path) -> list[DiscoveryUnit]:
    """
    Find all discovery units under the stories root.

    For `<stories_root>/<rel>/<base>.stories.ts` the component is expected at
    `<components_root>/<rel>/<base>.component.ts`.

    Args:
        stories_root: Root directory of the stories tree
        components_root: Root directory of the components tree

    Returns:
        Units sorted by stories path

    Raises:
        DiscoveryError: If the stories root does not exist
    """
    stories_root = Path(stories_root)
    components_root = Path(components_root)

    if not stories_root.is_dir():
        raise DiscoveryError(
            f"Stories directory not found: {stories_root}",
            details={"stories_path": str(stories_root)},
        )

    units = []
    for stories_file in walk_stories(stories_root):
        base_name = stories_file.name[: -len(STORIES_SUFFIX)]
        rel_dir = stories_file.parent.relative_to(stories_root)
        component_dir = components_root / rel_dir
        units.append(DiscoveryUnit(
            base_name=base_name,
            stories_file=stories_file,
            component_dir=component_dir,
            component_file=component_dir / f"{base_name}{COMPONENT_SUFFIX}",
        ))

    units.sort(key=lambda u: u.stories_file.as_posix())
    logger.info(f"Discovered {len(units)} stories files under {stories_root}")
    return units

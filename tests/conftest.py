"""
Pytest fixtures for UIKB tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for uikb and root script imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.samples import (
    BADGE_COMPONENT,
    BADGE_DOC,
    BADGE_STORIES,
    BUTTON_STORIES,
    CARD_COMPONENT,
    CARD_STORIES_BROKEN,
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def component_library(temp_dir: Path) -> Path:
    """
    Create a small component library.

    Layout:
        stories/badge/badge.stories.ts      -> complete unit
        stories/button/button.stories.ts    -> no component file
        stories/card/card.stories.ts        -> broken stories syntax
        stories/node_modules/x/x.stories.ts -> ignored
    """
    stories = temp_dir / "stories"
    components = temp_dir / "components"

    (stories / "badge").mkdir(parents=True)
    (stories / "button").mkdir(parents=True)
    (stories / "card").mkdir(parents=True)
    (stories / "node_modules" / "x").mkdir(parents=True)
    (components / "badge").mkdir(parents=True)
    (components / "card").mkdir(parents=True)

    (stories / "badge" / "badge.stories.ts").write_text(BADGE_STORIES, encoding="utf-8")
    (stories / "button" / "button.stories.ts").write_text(BUTTON_STORIES, encoding="utf-8")
    (stories / "card" / "card.stories.ts").write_text(CARD_STORIES_BROKEN, encoding="utf-8")
    (stories / "node_modules" / "x" / "x.stories.ts").write_text(BUTTON_STORIES, encoding="utf-8")

    (components / "badge" / "badge.component.ts").write_text(BADGE_COMPONENT, encoding="utf-8")
    (components / "badge" / "badge.doc.mdx").write_text(BADGE_DOC, encoding="utf-8")
    (components / "card" / "card.component.ts").write_text(CARD_COMPONENT, encoding="utf-8")

    return temp_dir


@pytest.fixture
def knowledge_base_file(temp_dir: Path) -> Path:
    """A minimal knowledge base file for relay tests."""
    path = temp_dir / "knowledge_base.json"
    path.write_text(
        '[{"name": "Badge", "selector": "ui-badge", "aiHint": "Status labels",'
        ' "api": {"inputs": [], "outputs": []}}]',
        encoding="utf-8",
    )
    return path

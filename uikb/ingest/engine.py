"""
Build Engine

Runs discovery, per-unit extraction, validation and assembly, and writes the
knowledge base once at the end. Every run recomputes everything.
"""

import asyncio
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from uikb.ast.extractors import ComponentExtractor, DocumentationExtractor, StoriesExtractor
from uikb.ast.models import ComponentRecord
from uikb.configs.logging import get_logger
from uikb.configs.paths import KBPaths
from uikb.ingest.merge import assemble_record, validate_unit
from uikb.ingest.walker import DiscoveryUnit, discover_units
from uikb.ingest.writer import write_knowledge_base

logger = get_logger("ingest.engine")


@dataclass
class SkippedUnit:
    """A discovery unit that produced no record."""

    stories_file: str
    reason: str


@dataclass
class BuildResult:
    """Outcome of a build: emitted records and per-unit skips."""

    records: list[ComponentRecord] = field(default_factory=list)
    skipped: list[SkippedUnit] = field(default_factory=list)

    @property
    def duplicate_selectors(self) -> list[str]:
        counts = Counter(r.selector for r in self.records)
        return sorted(s for s, n in counts.items() if n > 1)


class UnitProcessor:
    """Runs the three extractors for one unit and assembles the result."""

    def __init__(
        self,
        component_extractor: Optional[ComponentExtractor] = None,
        stories_extractor: Optional[StoriesExtractor] = None,
        documentation_extractor: Optional[DocumentationExtractor] = None,
    ):
        self.component_extractor = component_extractor or ComponentExtractor()
        self.stories_extractor = stories_extractor or StoriesExtractor()
        self.documentation_extractor = documentation_extractor or DocumentationExtractor()

    async def process(self, unit: DiscoveryUnit) -> tuple[Optional[ComponentRecord], Optional[str]]:
        """
        Process a single unit.

        Any exception raised while extracting is logged and turned into a
        skip, so one bad file never stops the rest of the build.

        Returns:
            Tuple of (record, skip_reason); exactly one is None
        """
        logger.info(f"Processing {unit.base_name} ({unit.stories_file})")

        try:
            # Fan out: the extractors are independent reads
            component, stories, documentation = await asyncio.gather(
                asyncio.to_thread(self.component_extractor.extract, unit.component_file),
                asyncio.to_thread(self.stories_extractor.extract_file, unit.stories_file),
                asyncio.to_thread(self.documentation_extractor.extract, unit.component_dir),
            )
        except Exception as e:
            logger.error(f"Error processing {unit.stories_file}: {type(e).__name__}: {e}")
            return None, f"extraction failed: {type(e).__name__}"

        reason = validate_unit(component, stories)
        if reason is not None:
            logger.error(f"Skipping {unit.stories_file}: {reason}")
            return None, reason

        record = assemble_record(component, stories, documentation)
        logger.info(f"Extracted {record.name} <{record.selector}>")
        return record, None


async def build_knowledge_base(
    stories_path: str | Path,
    components_path: str | Path,
    processor: Optional[UnitProcessor] = None,
) -> BuildResult:
    """
    Build knowledge base records for every discovered unit.

    Units are processed one after another; records keep discovery order.

    Raises:
        DiscoveryError: If the stories root does not exist
    """
    units = discover_units(stories_path, components_path)
    processor = processor or UnitProcessor()
    result = BuildResult()

    for unit in units:
        record, reason = await processor.process(unit)
        if record is not None:
            result.records.append(record)
        else:
            result.skipped.append(SkippedUnit(stories_file=str(unit.stories_file), reason=reason))

    for selector in result.duplicate_selectors:
        logger.warning(f"Selector <{selector}> is used by more than one component")

    return result


def run_build(paths: KBPaths) -> BuildResult:
    """
    Build and write the knowledge base described by `paths`.

    Args:
        paths: Resolved stories/components roots and output path

    Returns:
        BuildResult of the run
    """
    start_time = time.time()
    logger.info(f"Starting build: stories={paths.stories_path} components={paths.components_path}")

    result = asyncio.run(build_knowledge_base(paths.stories_path, paths.components_path))
    write_knowledge_base(result.records, paths.output_path)

    elapsed = time.time() - start_time
    logger.info(
        f"Build complete: {len(result.records)} components, "
        f"{len(result.skipped)} skipped in {elapsed:.1f}s"
    )
    return result

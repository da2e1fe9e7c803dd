"""
UIKB Build Pipeline

Discovery, merge/assembly and the knowledge base writer.
"""

from uikb.ingest.engine import BuildResult, SkippedUnit, UnitProcessor, build_knowledge_base, run_build
from uikb.ingest.merge import assemble_record, merge_descriptions, validate_unit
from uikb.ingest.walker import DiscoveryUnit, discover_units, walk_stories
from uikb.ingest.writer import load_knowledge_base, serialize_knowledge_base, write_knowledge_base

__all__ = [
    # Walker
    "DiscoveryUnit",
    "discover_units",
    "walk_stories",
    # Merge
    "merge_descriptions",
    "validate_unit",
    "assemble_record",
    # Engine
    "BuildResult",
    "SkippedUnit",
    "UnitProcessor",
    "build_knowledge_base",
    "run_build",
    # Writer
    "write_knowledge_base",
    "serialize_knowledge_base",
    "load_knowledge_base",
]

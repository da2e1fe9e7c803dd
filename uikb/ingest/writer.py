"""
Knowledge Base Writer

Serializes records to the knowledge base JSON artifact and reads it back.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Sequence

from uikb.ast.models import ComponentRecord
from uikb.configs.logging import get_logger

logger = get_logger("ingest.writer")


def serialize_knowledge_base(records: Sequence[ComponentRecord]) -> str:
    """Render records as the knowledge base JSON text."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False) + "\n"


def write_knowledge_base(records: Sequence[ComponentRecord], path: str | Path) -> Path:
    """
    Write the knowledge base to disk atomically.

    Uses atomic write (write to temp file, then rename) so readers never see
    a partial file.

    Args:
        records: Assembled component records
        path: Output file path

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = serialize_knowledge_base(records)

    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        shutil.move(tmp_path, path)  # Atomic on POSIX
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise

    logger.info(f"Knowledge base written to {path} ({len(records)} components)")
    return path


def load_knowledge_base(path: str | Path) -> list[dict[str, Any]]:
    """
    Load a knowledge base file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

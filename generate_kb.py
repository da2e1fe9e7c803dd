#!/usr/bin/env python3
"""
UIKB Knowledge Base Generator

Scans the component library's stories, components and docs and writes
knowledge_base.json. Configuration comes from the environment and an
optional uikb.yaml in the working directory.
"""

import sys

from uikb.configs import get_logger, get_paths, setup_logging
from uikb.exceptions import UIKBError
from uikb.ingest import run_build


def main() -> int:
    # Initialize logging (must be called before get_logger)
    setup_logging()
    logger = get_logger("generate")

    try:
        paths = get_paths()
        run_build(paths)
    except UIKBError as e:
        logger.error(f"Build failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

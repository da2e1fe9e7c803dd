#!/usr/bin/env python3
"""
UIKB HTTP Server

Serves the code generation relay:
- POST /api/generate-code
- GET  /api/list-models
- GET  /health

Environment:
  UIKB_HOST: Bind address (default: 0.0.0.0)
  UIKB_PORT: Port (default: 8080)
  GEMINI_API_KEY: Read per request
"""

import os

from uikb.configs import setup_logging
from uikb.http import run_server


def main():
    setup_logging()
    host = os.environ.get("UIKB_HOST", "0.0.0.0")
    port = int(os.environ.get("UIKB_PORT", "8080"))
    run_server(host=host, port=port)


if __name__ == "__main__":
    main()

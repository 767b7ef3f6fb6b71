"""WSGI entrypoint for the todo lists app."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path when running this file directly
ROOT = Path(__file__).resolve().parent
PARENT = ROOT.parent
if str(PARENT) not in sys.path:
    sys.path.insert(0, str(PARENT))

from todolists import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    import os

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))
    host = os.environ.get("FLASK_RUN_HOST", "127.0.0.1")
    port = int(os.environ.get("FLASK_RUN_PORT", "4567"))
    app.run(host=host, port=port)  # nosec B104

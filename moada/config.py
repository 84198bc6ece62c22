"""Application configuration."""

import os
from pathlib import Path

# Remote exchange service
EXCHANGE_API_URL = os.environ.get("MOADA_API_URL", "http://localhost:8082").strip().rstrip("/")
REQUEST_TIMEOUT = float(os.environ.get("MOADA_REQUEST_TIMEOUT", "30"))

# Presentation
DISPLAY_TIMEZONE = os.environ.get("MOADA_DISPLAY_TIMEZONE", "UTC").strip() or "UTC"

# CLI downloads land here
DOWNLOADS_DIR = Path(os.environ.get("MOADA_DOWNLOADS_DIR", "."))

LOG_LEVEL = os.environ.get("MOADA_LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

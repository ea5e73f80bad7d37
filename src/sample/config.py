# src/sample/config.py

"""
Environment configuration for the sample test suite.

Settings are read from `os.environ`. A `.env` file in the project root is
loaded once at import time so local overrides do not have to be exported in
the shell.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# --- Configuration & Environment Loading ---
# Navigate three levels up from this file's location (src/sample/config.py) to the project root.
# Assumes the src/ layout. A non-editable install has no project root, so no .env is found there.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

LOG_LEVEL_ENV = "SAMPLE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level() -> int:
    """Returns the numeric logging level configured via SAMPLE_LOG_LEVEL."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
    if raw not in _LEVEL_NAMES:
        raise ValueError(f"Unknown log level '{raw}' in {LOG_LEVEL_ENV}.")
    return getattr(logging, raw)

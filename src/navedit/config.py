"""Local configuration for navedit."""

from __future__ import annotations

import os


DEFAULT_API_BASE_URL = "http://localhost:8081"
DEFAULT_API_TIMEOUT_S = 10.0
DEFAULT_API_MAX_RETRIES = 2
DEFAULT_API_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "navedit/0.1"
DEFAULT_PRESS_DWELL_MS = 500
DEFAULT_LOG_LEVEL = "INFO"

# Backing navigation service (GET/POST /nav, POST /track).
NAVEDIT_API_BASE_URL = os.getenv("NAVEDIT_API_BASE_URL", DEFAULT_API_BASE_URL)
NAVEDIT_API_TIMEOUT_S = float(os.getenv("NAVEDIT_API_TIMEOUT_S", str(DEFAULT_API_TIMEOUT_S)))
NAVEDIT_API_MAX_RETRIES = int(os.getenv("NAVEDIT_API_MAX_RETRIES", str(DEFAULT_API_MAX_RETRIES)))
NAVEDIT_API_BACKOFF_S = float(os.getenv("NAVEDIT_API_BACKOFF_S", str(DEFAULT_API_BACKOFF_S)))
NAVEDIT_USER_AGENT = os.getenv("NAVEDIT_USER_AGENT", DEFAULT_USER_AGENT)

# How long a row must be held before the session switches to editing.
NAVEDIT_PRESS_DWELL_MS = int(os.getenv("NAVEDIT_PRESS_DWELL_MS", str(DEFAULT_PRESS_DWELL_MS)))
NAVEDIT_LOG_LEVEL = os.getenv("NAVEDIT_LOG_LEVEL", DEFAULT_LOG_LEVEL)

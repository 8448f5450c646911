"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a developer's .env overrides for logging
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")

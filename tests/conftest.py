"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a developer's .env directory settings
os.environ.setdefault("ENTERPRISE_HOST", "localhost")
os.environ.setdefault("ENTERPRISE_PORT", "8080")
os.environ.setdefault("LOG_FORMAT", "text")

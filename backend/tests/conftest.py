"""Root conftest — shared test configuration."""

import os

# Deterministic settings regardless of the developer's .env
os.environ.setdefault("LOCALE", "ja")
os.environ.setdefault("TIMEZONE", "Asia/Tokyo")
os.environ.setdefault("LOG_FORMAT", "text")

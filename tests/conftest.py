"""Test configuration for the book service."""

import os

# Must run before any src.book_service import loads the configuration
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE", "")

from tests.fixtures import *  # noqa: E402,F401,F403

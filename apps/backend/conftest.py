"""Pytest configuration and fixtures"""

import os

# Set test environment variables BEFORE any imports
# This must happen at module load time, not in a fixture
os.environ.pop("DATABASE_URL", None)
os.environ.pop("REDIS_URL", None)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENV"] = "test"

"""Test configuration for the product catalog."""

import os
from pathlib import Path

# Configuration is loaded on first import of the runtime context, so the
# environment has to be in place before any application module is imported.
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["CONFIG_FILE"] = str(Path(__file__).resolve().parent.parent / "config.yaml")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("LOG_FILE", None)

from tests.fixtures import *  # noqa: E402,F401,F403

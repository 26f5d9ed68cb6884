"""Shared test configuration."""

import os

# main.py builds the application at import time
os.environ.setdefault("SPREADSHEET_KEY", "test-sheet-key")

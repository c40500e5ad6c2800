"""Pytest configuration for fieldnn tests."""

import sys
from pathlib import Path

# Make the package importable without installing it
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

"""
Pytest configuration.

Ensures the src directory is on the path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so imports work
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch):
    """Keep a GUMAP_CONFIG in the environment from leaking into tests."""
    monkeypatch.delenv("GUMAP_CONFIG", raising=False)

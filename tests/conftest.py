"""
Configuration for verrange tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to path if running tests directly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from verrange import Version  # noqa: E402
from verrange.constants import ASCII_ONLY_ENV  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "cli: tests that drive the command-line entry point")


@pytest.fixture(autouse=True)
def unicode_parsing(monkeypatch):
    """Make every test start without the ASCII-only switch, and restore it afterwards."""
    monkeypatch.setenv(ASCII_ONLY_ENV, "0")


@pytest.fixture
def v():
    """Shorthand for Version.of."""
    return Version.of

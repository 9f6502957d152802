"""
Shared fixtures for binder_core tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from binder_core.log_host import LogHost


@pytest.fixture(autouse=True)
def reset_log_host():
    """Keep the global sink from leaking between tests."""
    LogHost.reset()
    yield
    LogHost.reset()


@pytest.fixture
def clean_env(monkeypatch):
    """Drop logging settings inherited from the developer's environment."""
    for key in list(os.environ):
        if key.startswith(("BINDER_LOG_", "ENFOLDERER_")):
            monkeypatch.delenv(key)

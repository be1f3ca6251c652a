from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def reset_root_logging():
    """
    configure_logging() binds handlers to whatever stderr is current; drop them after
    each test so later tests never write to a closed capture stream.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)

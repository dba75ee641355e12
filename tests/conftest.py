from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared namespace and configuration fixtures used across the suite.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirsim.core.services.namespace import Namespace  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def namespace() -> Namespace:
    """Return an empty namespace whose root has id 0."""
    return Namespace()


@pytest.fixture
def populated_namespace() -> Namespace:
    """
    Return a namespace with the cursor back at the root.

    Structure (insertion order):
    /
      docs/
        readme.md
        img/
          logo.png
      notes.txt
      src/
        main.py
    """
    ns = Namespace()
    ns.create_directory("docs")
    ns.change_directory("docs")
    ns.create_file("readme.md")
    ns.create_directory("img")
    ns.change_directory("img")
    ns.create_file("logo.png")
    ns.change_directory("/")
    ns.create_file("notes.txt")
    ns.create_directory("src")
    ns.change_directory("src")
    ns.create_file("main.py")
    ns.change_directory("..")
    return ns


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete settings dictionary for testing.

    Reflects the structure defined in 'dirsim.domain.config'.
    """
    return {
        "root_name": "root",
        "id_seed": 0,
        "locale": "en",
        "log_level": "INFO",
        "save_log_file": False,
    }

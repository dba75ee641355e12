from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory that holds the configuration file and
the optional diagnostic log. The namespace itself never touches the disk.
"""

import os
from typing import List

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "dirsim"
UNIX_APP_DIR_NAME = ".dirsim"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/dirsim
    - Linux/Mac: ~/.dirsim

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def read_text_lines(path: str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines without trailing newlines.

    Args:
        path: File to read.

    Returns:
        List[str]: File lines.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()

from __future__ import annotations

"""
Domain Constants.

Centralizes the reserved navigation tokens, naming defaults, sentinels and
versioning shared by the namespace engine, the configuration domain and the
command driver.
"""

from typing import List

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# NAMESPACE DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_ROOT_NAME = "root"
DEFAULT_ID_SEED = 0

# Reserved targets for change_directory
PARENT_TOKEN = ".."
ROOT_TOKEN = "/"

PATH_SEPARATOR = "/"

# Returned by get_content when no file matches
CONTENT_NOT_FOUND = "<not found>"

# -----------------------------------------------------------------------------
# LOCALISATION
# -----------------------------------------------------------------------------
DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES: List[str] = ["en", "es"]

# Literal listing tags, never translated
FILE_TAG = "[File]"
DIRECTORY_TAG = "[Directory]"

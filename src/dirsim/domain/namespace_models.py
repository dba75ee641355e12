from __future__ import annotations

"""
Namespace Result Models.

Value objects handed from the namespace engine to the presentation layer:
navigation outcomes and kind-partitioned directory listings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# -----------------------------------------------------------------------------
# NAVIGATION
# -----------------------------------------------------------------------------

class NavigationStatus(str, Enum):
    """Outcome of a change_directory request."""
    MOVED = "moved"
    NO_PARENT = "no_parent"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"

    @property
    def ok(self) -> bool:
        return self is NavigationStatus.MOVED


# -----------------------------------------------------------------------------
# LISTINGS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Listing:
    """
    Children of a directory split by kind.

    Each group keeps the relative order of the view it was drained from.

    Attributes:
        files: Names of file children.
        directories: Names of directory children.
    """
    files: Tuple[str, ...] = ()
    directories: Tuple[str, ...] = ()

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def directory_count(self) -> int:
        return len(self.directories)

    @property
    def is_empty(self) -> bool:
        return not self.files and not self.directories

from __future__ import annotations

"""
Namespace Exception Hierarchy.

User-level failures (unknown names, navigation past the root) are reported
through status values and sentinels. The exceptions below signal programming
errors: a stale handle or a kind-specific operation applied to the wrong kind
of node.
"""


class NamespaceError(Exception):
    """Base class for every error raised by the namespace engine."""


class DanglingHandleError(NamespaceError, KeyError):
    """Raised when a handle does not address a live node."""

    def __init__(self, handle: int):
        super().__init__(handle)
        self.handle = handle

    def __str__(self) -> str:
        return f"Handle {self.handle} does not address a live node."


class NodeKindError(NamespaceError, TypeError):
    """Raised when a file-only or directory-only operation hits the other kind."""

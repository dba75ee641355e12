from __future__ import annotations

"""
Namespace rendering logic.

Transforms listings and subtrees into human-readable text lines. The
engine never prints; callers decide where the lines go.
"""

from typing import List, Optional, Tuple

from dirsim.core.services.namespace import Namespace
from dirsim.domain.constants import DIRECTORY_TAG, FILE_TAG
from dirsim.domain.namespace_models import Listing
from dirsim.domain.node_models import Node
from dirsim.utils.i18n import I18n, i18n


# -----------------------------------------------------------------------------
# Listing Rendering
# -----------------------------------------------------------------------------
def render_listing(listing: Listing, translator: Optional[I18n] = None) -> List[str]:
    """
    Render a listing as tagged lines followed by per-kind totals.

    Files come first, then directories, each group in the listing's order.
    An empty listing renders as a single empty-directory marker.

    Args:
        listing: Kind-partitioned children of a directory.
        translator: Message catalogue; the global one when omitted.

    Returns:
        List[str]: Output lines.
    """
    t = translator or i18n

    if listing.is_empty:
        return [t.t("listing.empty")]

    lines = [f"{FILE_TAG} {name}" for name in listing.files]
    lines.extend(f"{DIRECTORY_TAG} {name}" for name in listing.directories)
    lines.append(t.t("listing.total_files", count=listing.file_count))
    lines.append(t.t("listing.total_directories", count=listing.directory_count))
    return lines


# -----------------------------------------------------------------------------
# Tree Rendering Logic
# -----------------------------------------------------------------------------
def render_subtree(namespace: Namespace, node: Optional[Node] = None) -> List[str]:
    """
    Draw a node and everything below it using box-drawing connectors.

    Args:
        namespace: Namespace owning the node.
        node: Subtree root, the current directory when omitted.

    Returns:
        List[str]: One line per node, starting with the subtree root.
    """
    start = node if node is not None else namespace.current
    lines = [_label(start)]
    pending = _child_entries(namespace, start, prefix="")

    while pending:
        child, is_last, prefix = pending.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(child)}")

        if child.is_directory:
            new_prefix = prefix + ("    " if is_last else "│   ")
            pending.extend(_child_entries(namespace, child, prefix=new_prefix))
    return lines


def _child_entries(namespace: Namespace, node: Node, prefix: str) -> List[Tuple[Node, bool, str]]:
    """Children as (node, is_last, prefix), reversed so the stack pops them in order."""
    children = namespace.children_of(node)
    total = len(children)
    return [(child, i == total - 1, prefix) for i, child in reversed(list(enumerate(children)))]


def _label(node: Node) -> str:
    return f"{node.name}/" if node.is_directory else node.name

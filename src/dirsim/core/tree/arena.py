from __future__ import annotations

"""
Node Arena.

Owns every node of a namespace and addresses them by stable integer handles.
Parent links and the cursor are plain handles, so a removed node can only be
observed as a DanglingHandleError, never as freed state.

Implements the node-level primitives: child attachment and removal,
subtree destruction, depth-first name search and content access.
"""

import logging
from typing import Dict, Iterator, List, Optional

from dirsim.domain.errors import DanglingHandleError, NodeKindError
from dirsim.domain.node_models import (
    DirectoryBody,
    FileBody,
    Node,
    NodeKind,
    new_body,
)

logger = logging.getLogger(__name__)


class NodeArena:
    """Handle-addressed storage for the nodes of one namespace."""

    def __init__(self) -> None:
        self._nodes: Dict[int, Node] = {}
        self._next_handle = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, handle: object) -> bool:
        return handle in self._nodes

    # -------------------------------------------------------------------------
    # ALLOCATION
    # -------------------------------------------------------------------------

    def allocate(self, name: str, kind: NodeKind, node_id: int) -> Node:
        """Create a detached node and register it under a fresh handle."""
        handle = self._next_handle
        self._next_handle += 1
        node = Node(handle=handle, id=node_id, name=name, body=new_body(kind))
        self._nodes[handle] = node
        return node

    def get(self, handle: int) -> Node:
        try:
            return self._nodes[handle]
        except KeyError:
            raise DanglingHandleError(handle) from None

    def release(self, handle: int) -> int:
        """
        Destroy a node and its whole subtree.

        Args:
            handle: Root of the subtree to destroy.

        Returns:
            int: Number of nodes released.
        """
        self.get(handle)
        released = 0
        pending = [handle]
        # Explicit stack: chains can be deeper than the interpreter recursion limit
        while pending:
            node = self._nodes.pop(pending.pop())
            if isinstance(node.body, DirectoryBody):
                pending.extend(node.body.children)
                node.body.children.clear()
            released += 1
        return released

    # -------------------------------------------------------------------------
    # CHILD MUTATION
    # -------------------------------------------------------------------------

    def add_child(self, parent_handle: int, child_handle: int) -> None:
        """Append a node to a directory and point its parent link back."""
        parent = self.get(parent_handle)
        child = self.get(child_handle)
        if not isinstance(parent.body, DirectoryBody):
            raise NodeKindError(f"Cannot add '{child.name}' under file '{parent.name}'.")
        parent.body.children.append(child_handle)
        child.parent = parent_handle

    def delete_child(self, parent_handle: int, name: str) -> bool:
        """
        Remove the first child whose name matches, destroying its subtree.

        Siblings sharing the name are left untouched.

        Returns:
            bool: True if a child was removed.
        """
        children = self.children_handles(parent_handle)
        for index, handle in enumerate(children):
            if self._nodes[handle].name == name:
                del children[index]
                released = self.release(handle)
                logger.debug(f"Removed '{name}' from handle {parent_handle} ({released} node(s) released)")
                return True
        return False

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def children_handles(self, handle: int) -> List[int]:
        """Live child handle list of a node (empty for files)."""
        node = self.get(handle)
        if isinstance(node.body, DirectoryBody):
            return node.body.children
        return []

    def iter_children(self, handle: int) -> Iterator[Node]:
        for child in self.children_handles(handle):
            yield self._nodes[child]

    def dfs(self, handle: int, name: str) -> Optional[Node]:
        """
        Depth-first name search rooted at a node.

        Match order: the node itself, then for each child in insertion
        order the child's subtree (directories only) followed by the child's
        own name. The first match wins.

        A directory's subtree search starts with the directory itself, so the
        visit order is a plain pre-order walk driven by an explicit stack.
        """
        pending = [self.get(handle)]
        while pending:
            node = pending.pop()
            if node.name == name:
                return node
            if isinstance(node.body, DirectoryBody):
                pending.extend(self._nodes[child] for child in reversed(node.body.children))
        return None

    def ancestors(self, handle: int) -> Iterator[Node]:
        """Yield the parents of a node, nearest first."""
        parent = self.get(handle).parent
        while parent is not None:
            node = self.get(parent)
            yield node
            parent = node.parent

    # -------------------------------------------------------------------------
    # CONTENT
    # -------------------------------------------------------------------------

    def get_content(self, handle: int) -> str:
        return self._file_body(handle).content

    def set_content(self, handle: int, text: str) -> None:
        self._file_body(handle).content = text

    def _file_body(self, handle: int) -> FileBody:
        node = self.get(handle)
        if not isinstance(node.body, FileBody):
            raise NodeKindError(f"'{node.name}' is a directory and holds no content.")
        return node.body

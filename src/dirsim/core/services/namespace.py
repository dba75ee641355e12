from __future__ import annotations

"""
Namespace Service (Tree/Cursor).

Owns the root directory, the node arena and the id generator, and keeps the
current-directory cursor. Every public namespace operation enters here and is
resolved against the cursor (or the root, for global lookups) before being
delegated to the arena primitives.

User-level failures are reported with status values, booleans, None and the
CONTENT_NOT_FOUND sentinel. This service never prints.
"""

import logging
from typing import List, Optional

from dirsim.core.tree.arena import NodeArena
from dirsim.core.tree.ids import IdGenerator
from dirsim.core.tree.ordering import IdSortedChildren, sort_children_by_id
from dirsim.core.tree.views import (
    drain_oldest_first,
    iter_insertion_order,
    iter_latest_first,
    partition_by_kind,
)
from dirsim.domain.constants import (
    CONTENT_NOT_FOUND,
    DEFAULT_ROOT_NAME,
    PARENT_TOKEN,
    PATH_SEPARATOR,
    ROOT_TOKEN,
)
from dirsim.domain.namespace_models import Listing, NavigationStatus
from dirsim.domain.node_models import Node, NodeKind

logger = logging.getLogger(__name__)


class Namespace:
    """
    In-memory hierarchical namespace with a single working-directory cursor.

    Not thread-safe: exactly one caller drives the cursor at a time.
    """

    def __init__(
            self,
            root_name: str = DEFAULT_ROOT_NAME,
            id_generator: Optional[IdGenerator] = None,
    ):
        """
        Create the namespace and its root directory.

        Args:
            root_name: Name given to the root directory.
            id_generator: Source of node ids. A fresh generator seeded at 0
                          is used when omitted.
        """
        self._ids = id_generator if id_generator is not None else IdGenerator()
        self._arena = NodeArena()
        root = self._arena.allocate(root_name, NodeKind.DIRECTORY, self._ids.next_id())
        self._root = root.handle
        self._current = root.handle
        logger.debug(f"Namespace created with root '{root_name}' (id {root.id})")

    # -------------------------------------------------------------------------
    # STATE
    # -------------------------------------------------------------------------

    @property
    def root(self) -> Node:
        return self._arena.get(self._root)

    @property
    def current(self) -> Node:
        return self._arena.get(self._current)

    @property
    def size(self) -> int:
        """Number of live nodes, root included."""
        return len(self._arena)

    def children_of(self, node: Node) -> List[Node]:
        """Children of a node in insertion order (empty for files)."""
        return list(iter_insertion_order(self._arena, node.handle))

    def path_of(self, node: Node) -> str:
        names = [n.name for n in self._arena.ancestors(node.handle)]
        if node.handle == self._root:
            return PATH_SEPARATOR
        # The root contributes the leading separator, not its name
        names = names[:-1]
        names.reverse()
        names.append(node.name)
        return PATH_SEPARATOR + PATH_SEPARATOR.join(names)

    def current_path(self) -> str:
        return self.path_of(self.current)

    # -------------------------------------------------------------------------
    # CREATION
    # -------------------------------------------------------------------------

    def create_file(self, name: str) -> Node:
        return self._create(name, NodeKind.FILE)

    def create_directory(self, name: str) -> Node:
        return self._create(name, NodeKind.DIRECTORY)

    def _create(self, name: str, kind: NodeKind) -> Node:
        node = self._arena.allocate(name, kind, self._ids.next_id())
        self._arena.add_child(self._current, node.handle)
        logger.debug(f"Created {kind.value} '{name}' (id {node.id}) in '{self.current.name}'")
        return node

    # -------------------------------------------------------------------------
    # NAVIGATION & SEARCH
    # -------------------------------------------------------------------------

    def change_directory(self, target: str) -> NavigationStatus:
        """
        Move the cursor.

        Args:
            target: ".." for the parent, "/" for the root, or a name resolved
                    by depth-first search from the current directory.

        Returns:
            NavigationStatus: MOVED, or the reason the cursor stayed put.
        """
        if target == PARENT_TOKEN:
            parent = self.current.parent
            if parent is None:
                logger.debug("Already at the root; there is no parent directory.")
                return NavigationStatus.NO_PARENT
            self._current = parent
            return NavigationStatus.MOVED

        if target == ROOT_TOKEN:
            self._current = self._root
            return NavigationStatus.MOVED

        found = self._arena.dfs(self._current, target)
        if found is None:
            logger.debug(f"Directory '{target}' not found under '{self.current.name}'.")
            return NavigationStatus.NOT_FOUND
        if not found.is_directory:
            logger.debug(f"'{target}' is a file; the cursor only enters directories.")
            return NavigationStatus.NOT_A_DIRECTORY

        self._current = found.handle
        logger.debug(f"Cursor moved to '{self.current_path()}'")
        return NavigationStatus.MOVED

    def find_node(self, name: str) -> Optional[Node]:
        """Depth-first search scoped to the current directory."""
        return self._arena.dfs(self._current, name)

    def find_node_in_all(self, name: str) -> Optional[Node]:
        """Depth-first search over the whole namespace."""
        return self._arena.dfs(self._root, name)

    # -------------------------------------------------------------------------
    # CONTENT
    # -------------------------------------------------------------------------

    def set_content(self, file_name: str, text: str) -> bool:
        """Overwrite a direct child file's content. No-op if it is missing."""
        node = self._direct_file(file_name)
        if node is None:
            return False
        self._arena.set_content(node.handle, text)
        return True

    def get_content(self, file_name: str) -> str:
        """Content of a direct child file, or CONTENT_NOT_FOUND."""
        node = self._direct_file(file_name)
        if node is None:
            return CONTENT_NOT_FOUND
        return self._arena.get_content(node.handle)

    def _direct_file(self, name: str) -> Optional[Node]:
        for child in iter_insertion_order(self._arena, self._current):
            if child.name == name and child.is_file:
                return child
        return None

    # -------------------------------------------------------------------------
    # LISTINGS
    # -------------------------------------------------------------------------

    def list_all(self) -> Listing:
        return partition_by_kind(iter_insertion_order(self._arena, self._current))

    def list_latest(self) -> Listing:
        return partition_by_kind(iter_latest_first(self._arena, self._current))

    def list_oldest(self) -> Listing:
        return partition_by_kind(drain_oldest_first(self._arena, self._current))

    # -------------------------------------------------------------------------
    # DELETION
    # -------------------------------------------------------------------------

    def delete_node(self, name: str) -> bool:
        """Remove the first direct child with this name and its subtree."""
        return self._arena.delete_child(self._current, name)

    # -------------------------------------------------------------------------
    # ID ORDERING
    # -------------------------------------------------------------------------

    def sort_children_by_id(self, nodes: Optional[List[Node]] = None) -> IdSortedChildren:
        """
        Sort nodes ascending by id.

        Args:
            nodes: List sorted in place. Defaults to a snapshot of the current
                   directory's children, leaving the stored order untouched.
        """
        if nodes is None:
            nodes = self.children_of(self.current)
        return sort_children_by_id(nodes)

    def find_child_by_id(self, node_id: int) -> Optional[Node]:
        return self.sort_children_by_id().find(node_id)

    def override_node_id(self, name: str, new_id: int) -> bool:
        """
        Administrative override of a direct child's id.

        Uniqueness is not re-checked; the caller is responsible for it.
        """
        for child in iter_insertion_order(self._arena, self._current):
            if child.name == name:
                logger.warning(f"Overriding id of '{name}': {child.id} -> {new_id}")
                child.id = new_id
                return True
        return False

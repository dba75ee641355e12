from __future__ import annotations

"""
Child Enumeration Views.

A directory stores its children once, in insertion order. The three listing
orders are read projections over that list:

- insertion order (first created first),
- latest first (reverse insertion order),
- oldest first, produced by draining a FIFO queue of the children.
"""

from collections import deque
from typing import Deque, Iterable, Iterator, List

from dirsim.core.tree.arena import NodeArena
from dirsim.domain.namespace_models import Listing
from dirsim.domain.node_models import Node


def iter_insertion_order(arena: NodeArena, handle: int) -> Iterator[Node]:
    return arena.iter_children(handle)


def iter_latest_first(arena: NodeArena, handle: int) -> Iterator[Node]:
    children = arena.children_handles(handle)
    for child in reversed(children):
        yield arena.get(child)


def drain_oldest_first(arena: NodeArena, handle: int) -> Iterator[Node]:
    """Load the children into a queue and dequeue them until it is empty."""
    pending: Deque[Node] = deque(arena.iter_children(handle))
    while pending:
        yield pending.popleft()


def partition_by_kind(nodes: Iterable[Node]) -> Listing:
    """Split nodes into file and directory names, keeping their order."""
    files: List[str] = []
    directories: List[str] = []
    for node in nodes:
        if node.is_file:
            files.append(node.name)
        else:
            directories.append(node.name)
    return Listing(files=tuple(files), directories=tuple(directories))

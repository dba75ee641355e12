from __future__ import annotations

"""
Id Ordering Utilities.

Children are kept in insertion order, which is not guaranteed to be id order
once an id has been overridden. Binary search by id is therefore only
available on IdSortedChildren, the result of a sort pass.
"""

import logging
from typing import List, Optional, Sequence

from dirsim.domain.node_models import Node

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# SORTING
# -----------------------------------------------------------------------------

def quick_sort_by_id(nodes: List[Node], left: int = 0, right: Optional[int] = None) -> None:
    """
    Sort a list of nodes in place, ascending by id.

    Quicksort with the last element of each range as pivot and a two-pointer
    partition. Recurses into the smaller partition and loops over the larger
    one, so already-sorted input does not exhaust the recursion limit.

    Args:
        nodes: List to reorder.
        left: First index of the range to sort.
        right: Last index of the range to sort (defaults to the list end).
    """
    if right is None:
        right = len(nodes) - 1

    while left < right:
        pivot = _partition(nodes, left, right)
        if pivot - left < right - pivot:
            quick_sort_by_id(nodes, left, pivot - 1)
            left = pivot + 1
        else:
            quick_sort_by_id(nodes, pivot + 1, right)
            right = pivot - 1


def _partition(nodes: List[Node], left: int, right: int) -> int:
    pivot_id = nodes[right].id
    i, j = left, right

    while i < j:
        while i < j and nodes[i].id <= pivot_id:
            i += 1
        while i < j and nodes[j].id >= pivot_id:
            j -= 1
        if i != j:
            nodes[i], nodes[j] = nodes[j], nodes[i]

    if i != right:
        nodes[i], nodes[right] = nodes[right], nodes[i]
    return i


# -----------------------------------------------------------------------------
# SORTED VIEW
# -----------------------------------------------------------------------------

class IdSortedChildren:
    """
    Nodes sorted ascending by id, searchable by binary search.

    Build instances with sort_children_by_id(); the constructor trusts that
    its input is already sorted.
    """

    def __init__(self, nodes: List[Node]):
        self._nodes = nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    @property
    def nodes(self) -> Sequence[Node]:
        return tuple(self._nodes)

    @property
    def ids(self) -> List[int]:
        return [n.id for n in self._nodes]

    def find(self, node_id: int) -> Optional[Node]:
        """Binary search for a node id. Returns None when absent."""
        low, high = 0, len(self._nodes) - 1
        while low <= high:
            middle = low + (high - low) // 2
            current = self._nodes[middle].id
            if current == node_id:
                return self._nodes[middle]
            if current > node_id:
                high = middle - 1
            else:
                low = middle + 1
        return None


def sort_children_by_id(nodes: List[Node]) -> IdSortedChildren:
    """Sort the given list in place and wrap it for id lookups."""
    quick_sort_by_id(nodes)
    logger.debug(f"Sorted {len(nodes)} node(s) by id")
    return IdSortedChildren(nodes)

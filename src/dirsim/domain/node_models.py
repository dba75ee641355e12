from __future__ import annotations

"""
Namespace Node Data Models.

A node is a tagged variant: its body is either a FileBody (holding content)
or a DirectoryBody (holding the ordered handles of its children). Nodes
reference their parent and children by arena handle, never by object.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    FILE = "File"
    DIRECTORY = "Directory"


@dataclass
class FileBody:
    """Payload of a file node."""
    content: str = ""


@dataclass
class DirectoryBody:
    """
    Payload of a directory node.

    Attributes:
        children: Child handles in insertion order. This list is the single
                  source for every enumeration order.
    """
    children: List[int] = field(default_factory=list)


NodeBody = Union[FileBody, DirectoryBody]


@dataclass
class Node:
    """
    One element of the namespace.

    Attributes:
        handle: Stable arena address, never reused.
        id: Identity assigned from the namespace id generator.
        name: Node name, unique among siblings only by convention.
        body: FileBody or DirectoryBody.
        parent: Handle of the parent directory, None for the root.
    """
    handle: int
    id: int
    name: str
    body: NodeBody
    parent: Optional[int] = None

    @property
    def kind(self) -> NodeKind:
        if isinstance(self.body, DirectoryBody):
            return NodeKind.DIRECTORY
        return NodeKind.FILE

    @property
    def is_file(self) -> bool:
        return isinstance(self.body, FileBody)

    @property
    def is_directory(self) -> bool:
        return isinstance(self.body, DirectoryBody)

    @property
    def is_root(self) -> bool:
        return self.parent is None


def new_body(kind: NodeKind) -> NodeBody:
    """Build an empty body for the requested kind."""
    if kind == NodeKind.DIRECTORY:
        return DirectoryBody()
    return FileBody()

from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Node kind is derived from the body variant.
2. Listing counters and emptiness.
3. NavigationStatus success flag.
4. Exception hierarchy compatibility with builtin lookups.
"""

import pytest

from dirsim.domain.errors import DanglingHandleError, NamespaceError, NodeKindError
from dirsim.domain.namespace_models import Listing, NavigationStatus
from dirsim.domain.node_models import DirectoryBody, FileBody, Node, NodeKind, new_body


def test_node_kind_follows_body():
    f = Node(handle=0, id=0, name="f", body=FileBody())
    d = Node(handle=1, id=1, name="d", body=DirectoryBody())

    assert f.kind is NodeKind.FILE and f.is_file and not f.is_directory
    assert d.kind is NodeKind.DIRECTORY and d.is_directory and not d.is_file
    assert f.is_root and d.is_root


def test_new_body_builds_empty_variants():
    assert new_body(NodeKind.FILE) == FileBody(content="")
    assert new_body(NodeKind.DIRECTORY) == DirectoryBody(children=[])


def test_directory_bodies_do_not_share_children():
    a, b = DirectoryBody(), DirectoryBody()
    a.children.append(1)

    assert b.children == []


def test_listing_counters():
    listing = Listing(files=("a", "b"), directories=("d",))

    assert listing.file_count == 2
    assert listing.directory_count == 1
    assert not listing.is_empty
    assert Listing().is_empty


def test_listing_is_frozen():
    listing = Listing()
    with pytest.raises(AttributeError):
        listing.files = ("x",)  # type: ignore[misc]


def test_navigation_status_ok_flag():
    assert NavigationStatus.MOVED.ok
    assert not NavigationStatus.NO_PARENT.ok
    assert not NavigationStatus.NOT_FOUND.ok


def test_error_hierarchy():
    err = DanglingHandleError(42)

    assert isinstance(err, NamespaceError)
    assert isinstance(err, KeyError)
    assert err.handle == 42
    assert "42" in str(err)
    assert issubclass(NodeKindError, TypeError)

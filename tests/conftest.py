# File: tests/conftest.py

import os
import sys
from typing import Dict, Iterator, List, Optional, Union

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from fsprims.features.file_walker.domain.interfaces import IFileSystem
from fsprims.features.file_walker.domain.models import DirEntry, PathStatus

# A fake tree node is one of:
#   list of child names -> directory
#   "file"              -> regular file
#   "other"             -> special file (FIFO, socket, ...)
#   an exception        -> status query fails with it
Node = Union[List[str], str, Exception]


class FakeFileSystem(IFileSystem):
    """
    In-memory IFileSystem for walks that need failures on demand.
    Running as root makes permission bits useless for that on a real disk.
    """
    def __init__(self, tree: Dict[str, Node], unlistable: Optional[Dict[str, Exception]] = None):
        self.tree = tree
        self.unlistable = unlistable or {}
        self.calls: List[str] = []

    def stat(self, path: str) -> PathStatus:
        self.calls.append(f"stat:{path}")
        node = self.tree.get(path)
        if node is None:
            raise FileNotFoundError(2, "No such file or directory", path)
        if isinstance(node, Exception):
            raise node
        if isinstance(node, list):
            return PathStatus(is_directory=True, is_file=False)
        return PathStatus(is_directory=False, is_file=(node == "file"))

    def list_dir(self, path: str) -> Iterator[DirEntry]:
        self.calls.append(f"list:{path}")
        if path in self.unlistable:
            raise self.unlistable[path]
        return iter([DirEntry(name=name) for name in self.tree[path]])

    def join(self, parent: str, name: str) -> str:
        # Plain concatenation on purpose: "root/" + "/" + "a" keeps the doubled separator
        return f"{parent}/{name}"


@pytest.fixture
def sample_tree(tmp_path):
    """
    Creates:
    root/
      a.txt
      sub/
        b.txt
        c.txt
    """
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)

    (root / "a.txt").write_text("alpha")
    (sub / "b.txt").write_text("bravo")
    (sub / "c.txt").write_text("charlie")

    return root


@pytest.fixture
def collect():
    """
    Returns (visitor, paths): the visitor appends every path it receives.
    """
    paths: List[str] = []
    return paths.append, paths


@pytest.fixture
def fake_fs():
    """
    Factory for FakeFileSystem instances: fake_fs(tree, unlistable=None).
    """
    return FakeFileSystem

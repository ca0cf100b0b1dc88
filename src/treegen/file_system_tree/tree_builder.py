"""Recursive construction of TreeNode trees from the filesystem."""

import os
import stat
from pathlib import Path
from typing import Optional

from treegen.file_system_tree.tree_node import TreeNode
from treegen.types import PathType


def build_tree(path: PathType, follow_symlinks: bool = True) -> TreeNode:
    """Build a tree of nodes for a path and everything beneath it.

    The root node is named after the final component of the path, or after the
    full path string when there is none (for example "." or "/"). Directory
    entries are added in the order the host filesystem enumerates them; they are
    not sorted. Every node starts out included and receives a fresh identity.

    Args:
        path: Path to a directory or file. Relative and absolute forms are accepted.
        follow_symlinks: Whether to recurse into symbolic links that point at
            directories. Defaults to True.

    Returns:
        The root node of the newly built tree.

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If any stat or directory listing fails during traversal. The
            build is aborted and no partial tree is returned.

    Example:
        >>> root = build_tree("src")  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['treegen']
    """
    path_str = os.fspath(path)
    name = Path(path_str).name or path_str
    return _create_node(path_str, name, follow_symlinks)


def _create_node(
    path: str,
    name: str,
    follow_symlinks: bool,
    parent: Optional[TreeNode] = None,
) -> TreeNode:
    """Recursively create tree nodes for a path and its children."""
    mode = os.stat(path, follow_symlinks=follow_symlinks).st_mode
    is_dir = stat.S_ISDIR(mode)
    node = TreeNode(name, parent=parent, is_dir=is_dir)
    if not is_dir:
        return node

    for child in os.listdir(path):
        _create_node(os.path.join(path, child), child, follow_symlinks, parent=node)

    return node

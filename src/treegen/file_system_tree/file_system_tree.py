"""File system tree representation with lazy building.

This module provides the FileSystemTree class, a convenience wrapper that builds
a selectable tree for a root path on first access, keeps it cached, and renders it.
"""

from pathlib import Path
from typing import Iterator, Optional

from anytree import PreOrderIter

from treegen.exclusion_rules.base_rules import BaseExclusionRules
from treegen.file_system_tree.tree_builder import build_tree
from treegen.file_system_tree.tree_node import TreeNode
from treegen.rendering import stream_tree_lines
from treegen.selection import apply_filter, exclude_matching
from treegen.types import PathType


class FileSystemTree:
    """A lazily built tree representation of a directory structure.

    The tree is built on first access and can be refreshed to reflect filesystem
    changes. Any I/O error during a build propagates to the caller and leaves no
    tree cached, so a later access retries the build.

    Attributes:
        root_path (Path): The path the tree is built from, as given.
        follow_symlinks (bool): Whether to recurse into symlinked directories.

    Example:
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> print(tree.get_tree_representation(), end="")  # doctest: +SKIP
        src
        |__ treegen
            |-- __init__.py
            |__ rendering.py
    """

    def __init__(self, root_path: PathType, follow_symlinks: bool = True) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent.
            follow_symlinks: Whether to recurse into symbolic links to directories.
                Defaults to True.
        """
        self.root_path = Path(root_path)
        self.follow_symlinks = follow_symlinks
        self._tree: Optional[TreeNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> TreeNode:
        """Get the root node of the filesystem tree, building it if needed.

        Returns:
            The root node of the tree.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            OSError: If the traversal fails.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        """Build the tree from the root path and count its entries."""
        self._tree = build_tree(self.root_path, follow_symlinks=self.follow_symlinks)
        self._count_files_and_directories()

    def _count_files_and_directories(self) -> None:
        """Count files and directories in the tree, excluding the root directory."""
        self._file_count = 0
        self._directory_count = 0
        if self._tree is None:
            return
        for node in PreOrderIter(self._tree):
            if node is self._tree:
                continue
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the number of non-directory entries in the tree."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree diagram one newline-terminated line at a time.

        Raises:
            OSError: If the tree has not been built yet and building it fails.
        """
        yield from stream_tree_lines(self.get_tree())

    def get_tree_representation(self) -> str:
        """Get the complete tree diagram as a string."""
        return "".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree and rebuild it from the filesystem.

        Raises:
            OSError: If the rebuild fails. No tree stays cached in that case.
        """
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()

    def apply_exclusions(self, rules: BaseExclusionRules) -> int:
        """Prune every entry matching the exclusion rules from the cached tree.

        Matching entries are deselected together with their subtrees and then
        removed. Counts are updated to describe the pruned tree. A later refresh()
        rebuilds the unpruned tree.

        Args:
            rules: Exclusion rules matched against paths relative to the root.

        Returns:
            The number of entries whose subtrees were removed.
        """
        tree = self.get_tree()
        excluded = exclude_matching(tree, rules)
        apply_filter(tree)
        self._count_files_and_directories()
        return excluded

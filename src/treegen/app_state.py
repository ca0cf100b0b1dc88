"""Application state shared by the interactive front-ends.

ApplicationState holds the current tree, the working copy edited while a filter
is being chosen, and the rendered text. Front-ends forward their events (path
entry, directory dialog result, checkbox toggles, apply/cancel, copy) to it and
display ``tree_text`` afterwards.
"""

import uuid
from pathlib import Path
from typing import Callable, Optional

from treegen.file_system_tree.tree_builder import build_tree
from treegen.file_system_tree.tree_node import TreeNode
from treegen.rendering import render
from treegen.selection import apply_filter, toggle_by_identity


class ApplicationState:
    """State of a tree generation session.

    Attributes:
        folder_path (str): The path entered or chosen by the user.
        follow_symlinks (bool): Whether builds recurse into symlinked directories.
        tree (Optional[TreeNode]): The tree currently displayed.
        working_copy (Optional[TreeNode]): Clone of ``tree`` being edited in the
            filter dialog, or None when no filter is being edited.
        tree_text (str): Rendering of ``tree``.

    Example:
        >>> state = ApplicationState()
        >>> state.set_folder_path("src")
        >>> state.generate_tree()  # doctest: +SKIP
        >>> print(state.tree_text, end="")  # doctest: +SKIP
        src
        |__ treegen
    """

    def __init__(self, follow_symlinks: bool = True) -> None:
        self.folder_path = ""
        self.follow_symlinks = follow_symlinks
        self.tree: Optional[TreeNode] = None
        self.working_copy: Optional[TreeNode] = None
        self.tree_text = ""

    def set_folder_path(self, path: str) -> None:
        self.folder_path = path

    def choose_directory(self, picker: Callable[[], Optional[Path]]) -> Optional[Path]:
        """Ask the picker for a directory and adopt it as the folder path.

        Args:
            picker: Callable returning the chosen path, or None if cancelled.

        Returns:
            The chosen path, or None if the picker was cancelled. A cancelled
            picker leaves the path and tree untouched.
        """
        chosen = picker()
        if chosen is not None:
            self.folder_path = str(chosen)
        return chosen

    def generate_tree(self) -> None:
        """Build and render a tree for the current folder path.

        The new tree replaces the previous one wholesale and any filter being
        edited is discarded.

        Raises:
            ValueError: If no folder path has been set.
            OSError: If building the tree fails. The previous tree and text are kept.
        """
        if not self.folder_path:
            raise ValueError("No folder path specified")
        tree = build_tree(self.folder_path, follow_symlinks=self.follow_symlinks)
        self.tree = tree
        self.working_copy = None
        self.tree_text = render(tree)

    def begin_filter(self) -> TreeNode:
        """Start editing a filter on a clone of the current tree.

        Returns:
            The working copy. Its identities match those of the current tree.

        Raises:
            ValueError: If no tree has been generated.
        """
        if self.tree is None:
            raise ValueError("No tree has been generated")
        self.working_copy = self.tree.clone()
        return self.working_copy

    def toggle(self, identity: uuid.UUID, included: bool) -> None:
        """Include or exclude a subtree of the working copy.

        Toggles without a working copy, or for identities the working copy does
        not contain, are ignored.
        """
        if self.working_copy is not None:
            toggle_by_identity(self.working_copy, identity, included)

    def apply_filter(self) -> None:
        """Prune the working copy and make it the current tree."""
        if self.working_copy is None:
            return
        tree = self.working_copy
        apply_filter(tree)
        self.tree = tree
        self.working_copy = None
        self.tree_text = render(tree)

    def cancel_filter(self) -> None:
        self.working_copy = None

    def copy_to_clipboard(self, copier: Callable[[str], None]) -> None:
        """Hand the rendered text to a clipboard function.

        Args:
            copier: Callable placing text on the clipboard.

        Raises:
            ValueError: If nothing has been rendered yet.
            ClipboardError: Propagated unchanged from the copier.
        """
        if not self.tree_text:
            raise ValueError("No tree to copy")
        copier(self.tree_text)

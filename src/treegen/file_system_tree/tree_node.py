"""Node representation for file system entries in the tree."""

import uuid
from typing import Optional

from anytree import Node


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in a selectable filesystem tree.

    Extends anytree.Node with an identity used to address the node for toggling,
    a selection flag, and a flag recording whether the entry was recursed into as
    a directory. Inherits tree traversal and manipulation capabilities from
    anytree.Node; children keep their insertion order.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[TreeNode]): The parent node in the tree.
        identity (uuid.UUID): Value uniquely addressing this node within a tree snapshot.
            Identities are treated as data: cloning copies them verbatim.
        is_included (bool): Selection state. True at creation.
        is_dir (bool): True if the builder recursed into this entry as a directory.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("root", is_dir=True)
        >>> child = TreeNode("file.txt", parent=root)
        >>> child.is_included
        True
        >>> root.clone().children[0].identity == child.identity
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        identity: Optional[uuid.UUID] = None,
        is_included: bool = True,
        is_dir: bool = False,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The base name of the file or directory.
            parent: The parent node. Defaults to None.
            identity: Identity to assign. A fresh one is generated when omitted.
            is_included: Initial selection state. Defaults to True.
            is_dir: Whether this node represents a directory. Defaults to False.
        """
        super().__init__(name, parent)
        self.identity = identity if identity is not None else uuid.uuid4()
        self.is_included = is_included
        self.is_dir = is_dir

    def clone(self, parent: Optional["TreeNode"] = None) -> "TreeNode":
        """Create a deep copy of this node and its subtree.

        Identities, names, flags and child order are copied verbatim, so a toggle
        addressed by identity reaches the same entry in either copy.

        Args:
            parent: Parent for the copied node. Defaults to None, making the copy
                a detached root.

        Returns:
            The copied node.
        """
        copied = TreeNode(
            self.name,
            parent=parent,
            identity=self.identity,
            is_included=self.is_included,
            is_dir=self.is_dir,
        )
        for child in self.children:
            child.clone(parent=copied)
        return copied

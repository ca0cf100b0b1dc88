"""Checkbox-style selection and pruning of TreeNode trees.

Selection state only ever propagates downward: changing a node changes all of
its descendants, never its ancestors or siblings. Pruning removes excluded
subtrees permanently; keep a clone if the unfiltered tree is still needed.
"""

import uuid
from typing import Optional

from anytree import PreOrderIter

from treegen.exclusion_rules.base_rules import BaseExclusionRules
from treegen.file_system_tree.tree_node import TreeNode


def set_included_recursive(node: TreeNode, included: bool) -> None:
    """Set the selection state of a node and every descendant.

    Prior states in the subtree are overwritten unconditionally.

    Args:
        node: Root of the subtree to update.
        included: The selection state to apply.
    """
    for descendant in PreOrderIter(node):
        descendant.is_included = included


def find_by_identity(root: TreeNode, identity: uuid.UUID) -> Optional[TreeNode]:
    """Find the node carrying a given identity.

    Args:
        root: Root of the tree to search.
        identity: Identity of the node to find.

    Returns:
        The matching node, or None if no node in the tree carries the identity.
    """
    for node in PreOrderIter(root):
        if node.identity == identity:
            return node
    return None


def toggle_by_identity(root: TreeNode, identity: uuid.UUID, included: bool) -> None:
    """Set the selection state of the subtree addressed by identity.

    An identity that matches no node (for example one taken from an older
    snapshot of the tree) leaves the tree unchanged.

    Args:
        root: Root of the tree holding the target node.
        identity: Identity of the node to toggle.
        included: The selection state to apply to the node and its descendants.
    """
    node = find_by_identity(root, identity)
    if node is not None:
        set_included_recursive(node, included)


def apply_filter(root: TreeNode) -> None:
    """Remove every excluded subtree from the tree.

    Each level is evaluated using the children's own flags before recursing, so
    an excluded subtree is discarded wholesale. The root itself is never removed,
    whatever its own flag says.

    Args:
        root: Root of the tree to prune in place.
    """
    kept = [child for child in root.children if child.is_included]
    if len(kept) != len(root.children):
        root.children = kept
    for child in kept:
        apply_filter(child)


def exclude_matching(root: TreeNode, rules: BaseExclusionRules) -> int:
    """Mark nodes whose relative paths match exclusion rules as excluded.

    Paths are matched relative to the root using forward slashes, with a trailing
    slash on directories so that patterns like "build/" match. Once a node is
    excluded its whole subtree is excluded and not examined further. Nothing is
    pruned; follow with apply_filter() to remove the excluded subtrees.

    Args:
        root: Root of the tree. The root itself is never matched.
        rules: Exclusion rules to test relative paths against.

    Returns:
        The number of nodes whose subtrees were excluded by a rule.
    """
    excluded = 0

    def visit(node: TreeNode, relative_path: str) -> None:
        nonlocal excluded
        for child in node.children:
            child_path = f"{relative_path}{child.name}"
            match_path = f"{child_path}/" if child.is_dir else child_path
            if rules.exclude(match_path):
                set_included_recursive(child, False)
                excluded += 1
            else:
                visit(child, f"{child_path}/")

    visit(root, "")
    return excluded


def count_included(root: TreeNode) -> int:
    """Count the nodes of a subtree that are currently included.

    Args:
        root: Root of the subtree to count.

    Returns:
        Number of included nodes, the root included.
    """
    return sum(1 for node in PreOrderIter(root) if node.is_included)

"""Plain-text rendering of TreeNode trees.

The diagram follows the layout of the Unix ``tree`` command using ASCII markers:

    root
    |-- a.txt
    |-- b.txt
    |__ sub
        |__ c.txt

Rendering reflects the tree exactly as structured when called. Selection flags
are not consulted, so callers render either an unfiltered tree or one that has
already been pruned.
"""

from typing import Iterator, Tuple

from treegen.file_system_tree.tree_node import TreeNode

BRANCH = "|-- "
LAST_BRANCH = "|__ "
CONTINUATION = "|   "
BLANK = "    "


def stream_tree_lines(root: TreeNode) -> Iterator[str]:
    """Generate the tree diagram one line at a time.

    Lines are produced in depth-first pre-order, each terminated by a newline.
    The root line is the bare root name.

    Args:
        root: Root of the tree to render.

    Yields:
        Lines of the diagram, including the trailing newline.

    Example:
        >>> root = TreeNode("root")
        >>> _ = TreeNode("a.txt", parent=root)
        >>> list(stream_tree_lines(root))
        ['root\\n', '|__ a.txt\\n']
    """
    yield f"{root.name}\n"
    yield from _stream_children(root, ())


def _stream_children(node: TreeNode, ancestors_last: Tuple[bool, ...]) -> Iterator[str]:
    """Yield lines for the children of a node.

    Args:
        node: Node whose children are rendered.
        ancestors_last: For each ancestor level between the root and ``node``'s
            children, whether that ancestor was the last child of its parent.
    """
    prefix = "".join(BLANK if is_last else CONTINUATION for is_last in ancestors_last)
    children = node.children
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        yield f"{prefix}{connector}{child.name}\n"
        yield from _stream_children(child, ancestors_last + (is_last,))


def render(root: TreeNode) -> str:
    """Render a complete tree diagram as a single string.

    Args:
        root: Root of the tree to render.

    Returns:
        The diagram, one newline-terminated line per node.
    """
    return "".join(stream_tree_lines(root))

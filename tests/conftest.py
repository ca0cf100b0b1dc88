"""Test configuration and fixtures for treegen."""

import pytest

from treegen.file_system_tree.tree_node import TreeNode


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree():
    """Build the tree of a root holding a.txt, b.txt and sub/c.txt, in that order."""
    root = TreeNode("root", is_dir=True)
    TreeNode("a.txt", parent=root)
    TreeNode("b.txt", parent=root)
    sub = TreeNode("sub", parent=root, is_dir=True)
    TreeNode("c.txt", parent=sub)
    return root


@pytest.fixture
def nested_tree():
    """Build a deeper tree exercising both continuation markers."""
    root = TreeNode("project", is_dir=True)
    src = TreeNode("src", parent=root, is_dir=True)
    pkg = TreeNode("pkg", parent=src, is_dir=True)
    TreeNode("__init__.py", parent=pkg)
    TreeNode("core.py", parent=pkg)
    TreeNode("main.py", parent=src)
    docs = TreeNode("docs", parent=root, is_dir=True)
    TreeNode("index.md", parent=docs)
    return root

"""Unit tests for selection propagation and pruning."""

import uuid

from anytree import PreOrderIter
from anytree.exporter import DictExporter

from treegen.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treegen.file_system_tree.tree_node import TreeNode
from treegen.rendering import render
from treegen.selection import (
    apply_filter,
    count_included,
    exclude_matching,
    find_by_identity,
    set_included_recursive,
    toggle_by_identity,
)


def export(root):
    return DictExporter().export(root)


def by_name(root, name):
    return next(node for node in PreOrderIter(root) if node.name == name)


class TestSetIncludedRecursive:
    def test_excludes_node_and_descendants(self, nested_tree):
        src = by_name(nested_tree, "src")
        set_included_recursive(src, False)
        assert all(not node.is_included for node in PreOrderIter(src))

    def test_siblings_and_ancestors_unaffected(self, nested_tree):
        src = by_name(nested_tree, "src")
        set_included_recursive(src, False)
        assert nested_tree.is_included
        assert all(node.is_included for node in PreOrderIter(by_name(nested_tree, "docs")))

    def test_overwrites_prior_state(self, nested_tree):
        pkg = by_name(nested_tree, "pkg")
        by_name(nested_tree, "core.py").is_included = False
        set_included_recursive(pkg, True)
        assert all(node.is_included for node in PreOrderIter(pkg))

    def test_parent_included_child_excluded(self, nested_tree):
        set_included_recursive(by_name(nested_tree, "main.py"), False)
        assert by_name(nested_tree, "src").is_included
        assert not by_name(nested_tree, "main.py").is_included


class TestToggleByIdentity:
    def test_toggles_addressed_subtree(self, sample_tree):
        sub = sample_tree.children[2]
        toggle_by_identity(sample_tree, sub.identity, False)
        assert not sub.is_included
        assert not sub.children[0].is_included
        assert sample_tree.children[0].is_included
        assert sample_tree.children[1].is_included

    def test_reincludes_subtree(self, sample_tree):
        sub = sample_tree.children[2]
        toggle_by_identity(sample_tree, sub.identity, False)
        toggle_by_identity(sample_tree, sub.identity, True)
        assert all(node.is_included for node in PreOrderIter(sample_tree))

    def test_unknown_identity_is_noop(self, sample_tree):
        before = export(sample_tree)
        toggle_by_identity(sample_tree, uuid.uuid4(), False)
        assert export(sample_tree) == before

    def test_stale_identity_from_other_snapshot_is_noop(self, sample_tree):
        other = TreeNode("root")
        before = export(sample_tree)
        toggle_by_identity(sample_tree, other.identity, False)
        assert export(sample_tree) == before

    def test_identity_reaches_clone(self, sample_tree):
        clone = sample_tree.clone()
        toggle_by_identity(clone, sample_tree.children[0].identity, False)
        assert not clone.children[0].is_included
        assert sample_tree.children[0].is_included

    def test_find_by_identity(self, nested_tree):
        core = by_name(nested_tree, "core.py")
        assert find_by_identity(nested_tree, core.identity) is core
        assert find_by_identity(nested_tree, uuid.uuid4()) is None


class TestApplyFilter:
    def test_prunes_excluded_subtree(self, sample_tree):
        toggle_by_identity(sample_tree, sample_tree.children[2].identity, False)
        apply_filter(sample_tree)
        assert render(sample_tree) == "root\n|-- a.txt\n|__ b.txt\n"

    def test_no_excluded_node_remains(self, nested_tree):
        set_included_recursive(by_name(nested_tree, "core.py"), False)
        set_included_recursive(by_name(nested_tree, "docs"), False)
        apply_filter(nested_tree)
        assert all(node.is_included for node in PreOrderIter(nested_tree))
        assert [node.name for node in PreOrderIter(nested_tree)] == [
            "project",
            "src",
            "pkg",
            "__init__.py",
            "main.py",
        ]

    def test_root_never_removed(self, sample_tree):
        set_included_recursive(sample_tree, False)
        apply_filter(sample_tree)
        assert sample_tree.name == "root"
        assert sample_tree.children == ()
        assert render(sample_tree) == "root\n"

    def test_root_flag_not_consulted_for_children(self, sample_tree):
        sample_tree.is_included = False
        apply_filter(sample_tree)
        assert len(sample_tree.children) == 3

    def test_included_descendant_of_excluded_node_is_discarded(self, nested_tree):
        src = by_name(nested_tree, "src")
        src.is_included = False
        apply_filter(nested_tree)
        assert [child.name for child in nested_tree.children] == ["docs"]
        assert src.parent is None

    def test_idempotent(self, nested_tree):
        set_included_recursive(by_name(nested_tree, "pkg"), False)
        apply_filter(nested_tree)
        once = export(nested_tree)
        apply_filter(nested_tree)
        assert export(nested_tree) == once

    def test_preserves_order_of_kept_children(self):
        root = TreeNode("root")
        for name in ["e", "d", "c", "b", "a"]:
            TreeNode(name, parent=root)
        root.children[1].is_included = False
        root.children[3].is_included = False
        apply_filter(root)
        assert [child.name for child in root.children] == ["e", "c", "a"]


class TestExcludeMatching:
    def test_file_pattern(self, nested_tree):
        rules = GitIgnoreExclusionRules()
        rules.add_rule("*.md")
        assert exclude_matching(nested_tree, rules) == 1
        assert not by_name(nested_tree, "index.md").is_included
        assert by_name(nested_tree, "docs").is_included

    def test_directory_pattern_excludes_subtree(self, nested_tree):
        rules = GitIgnoreExclusionRules()
        rules.add_rule("pkg/")
        assert exclude_matching(nested_tree, rules) == 1
        assert all(not node.is_included for node in PreOrderIter(by_name(nested_tree, "pkg")))
        assert by_name(nested_tree, "main.py").is_included

    def test_directory_pattern_ignores_files(self):
        root = TreeNode("root", is_dir=True)
        TreeNode("build", parent=root)
        rules = GitIgnoreExclusionRules()
        rules.add_rule("build/")
        assert exclude_matching(root, rules) == 0

    def test_anchored_relative_path(self, nested_tree):
        rules = GitIgnoreExclusionRules()
        rules.add_rule("/src/main.py")
        exclude_matching(nested_tree, rules)
        assert not by_name(nested_tree, "main.py").is_included

    def test_negation(self, nested_tree):
        rules = GitIgnoreExclusionRules()
        rules.add_rule("*.py")
        rules.add_rule("!core.py")
        assert exclude_matching(nested_tree, rules) == 2
        assert by_name(nested_tree, "core.py").is_included

    def test_does_not_prune(self, nested_tree):
        rules = GitIgnoreExclusionRules()
        rules.add_rule("docs/")
        exclude_matching(nested_tree, rules)
        assert len(nested_tree.children) == 2
        apply_filter(nested_tree)
        assert [child.name for child in nested_tree.children] == ["src"]


def test_count_included(nested_tree):
    assert count_included(nested_tree) == 8
    set_included_recursive(by_name(nested_tree, "pkg"), False)
    assert count_included(nested_tree) == 5

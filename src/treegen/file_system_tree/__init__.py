"""File system tree representation with selectable nodes.

This package provides the node type, the recursive builder, and a lazily built
tree wrapper for representing directory structures whose nodes can be
individually included or excluded.
"""

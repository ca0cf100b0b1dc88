"""Directory tree diagram utilities.

This package builds in-memory trees of directory structures, lets callers include
or exclude subtrees, and renders the result as a plain-text tree diagram suitable
for display or clipboard export.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treegen")
except PackageNotFoundError:
    __version__ = "unknown"

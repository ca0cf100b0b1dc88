"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from treegen.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them:
    globs, directory patterns ending in "/", negations starting with "!", "**"
    and comment lines are all supported. Patterns from files and patterns added
    one at a time are kept in the order they were given, so later negations can
    re-include entries matched by earlier patterns.

    Attributes:
        spec (PathSpec): Compiled matcher over all patterns added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/build.py")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally loading pattern files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a relative path against the loaded patterns.

        Args:
            path: Slash-separated path relative to the tree root.

        Returns:
            bool: True if the last pattern deciding on the path excludes it.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Args:
            rules_files: Path-like object or sequence of path-like objects.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._patterns.extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

        self.spec = PathSpec(self._patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern.

        Args:
            rule: A pattern such as "*.pyc", "node_modules/" or "!keep.txt".
        """
        self._patterns.append(GitWildMatchPattern(rule))
        self.spec = PathSpec(self._patterns)

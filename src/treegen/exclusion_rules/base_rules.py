from abc import ABC, abstractmethod
from typing import Sequence, Union

from treegen.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that decide which tree entries are deselected.

    Rules are consulted with slash-separated paths relative to the root of a tree,
    directories carrying a trailing slash. A matching entry is marked excluded
    together with its subtree; pruning is left to the caller.

    Example:
        >>> from treegen.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a relative path should be excluded.

        Args:
            path (str): Slash-separated path relative to the tree root. Directory
                paths end with a slash.

        Returns:
            bool: True if the path should be excluded, False if it should be kept.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

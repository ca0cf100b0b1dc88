"""Command-line argument parsing for treegen.

This module defines the command-line interface for treegen,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from treegen import __version__
from treegen.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class that feeds exclusion options into a rules object.

    Rules are added as the options are parsed, so the order of -e/--exclude and
    -i/--ignore options on the command line is preserved.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action adding exclusion files and patterns to the rules as they are parsed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with treegen's options.
    """
    description = """
    treegen: Draw a directory as a plain-text tree diagram.

    The directory is scanned recursively and drawn in the style of the Unix `tree`
    command, using |-- and |__ connectors. Entries matching exclusion patterns are
    removed from the diagram together with everything beneath them. The diagram can
    be written to stdout or a file, or copied to the system clipboard.

    Entries appear in the order the filesystem lists them; they are not sorted.
    """

    epilog = """
    Examples:
      # Draw a directory
      treegen /path/to/project

      # Choose the directory with the native folder dialog
      treegen --pick

      # Leave out entries matching gitignore-style patterns
      treegen -i "*.pyc" -i "node_modules/" /path/to/project

      # Use the patterns of one or more exclusion files
      treegen -e .gitignore /path/to/project

      # Copy the diagram to the clipboard without printing it
      treegen -c -q /path/to/project

      # Save the diagram to a file and print entry counts to stderr
      treegen -o tree.txt -s /path/to/project

      # Display version information and exit
      treegen -V
    """

    parser = argparse.ArgumentParser(
        prog="treegen",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treegen {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help="The directory to draw. Required unless -p/--pick is given.",
    )
    parser.add_argument(
        "-p",
        "--pick",
        action="store_true",
        help="Choose the directory with the native folder dialog.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style exclusion file (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern of entries to leave out, e.g. '*.log', 'build/', '!keep.log'. "
            "Can be specified multiple times; patterns apply in command-line order, mixed with -e/--exclude."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-c",
        "--copy",
        action="store_true",
        help="Copy the diagram to the system clipboard.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not write the diagram to stdout. Only valid together with -c/--copy.",
    )
    parser.add_argument(
        "-P",
        "--no-follow-symlinks",
        dest="follow_symlinks",
        action="store_false",
        help="Do not descend into symbolic links to directories.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory and file counts to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.pick and args.directory is not None:
        raise ValueError("A directory argument cannot be combined with -p/--pick")
    if not args.pick and args.directory is None:
        raise ValueError("A directory is required unless -p/--pick is given")
    if args.quiet and not args.copy:
        raise ValueError("-q/--quiet requires -c/--copy")

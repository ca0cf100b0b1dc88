"""Command-line interface for treegen.

This module provides the `treegen` command, which draws a directory as a text tree
diagram, optionally leaving out entries matching exclusion patterns, and writes the
diagram to stdout, to a file, or to the system clipboard.

Exit Codes:
    0: Successful completion (including a cancelled folder dialog)
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Draw a directory
    $ treegen /path/to/dir

    # Leave out build output and copy the diagram to the clipboard
    $ treegen /path/to/dir -i build/ -c
"""

import sys
from collections.abc import Mapping

from treegen.cli.argparser import create_parser, validate_args
from treegen.cli.safe_writer import SafeWriter
from treegen.cli.signal_handler import setup_signal_handling, signal_handler
from treegen.clipboard import copy_to_clipboard
from treegen.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treegen.file_system_tree.file_system_tree import FileSystemTree


def format_counts(counts: Mapping[str, int]) -> str:
    """Format entry counts into a human-readable string.

    Args:
        counts: Mapping with "directories" and "files" counts.

    Returns:
        One labelled count per line.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
        ]
    )


def main() -> None:
    """Main entry point for the treegen command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        if args.pick:
            from treegen.dialogs import pick_directory

            directory = pick_directory()
            if directory is None:
                print("No directory selected.", file=sys.stderr)
                return
        else:
            directory = args.directory

        fs_tree = FileSystemTree(directory, follow_symlinks=args.follow_symlinks)
        try:
            fs_tree.apply_exclusions(exclusion_rules)
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        if args.copy:
            copy_to_clipboard(fs_tree.get_tree_representation())

        if args.output or not args.quiet:
            output_file = args.output if args.output else sys.stdout.fileno()
            with SafeWriter(output_file) as safe_writer:
                try:
                    safe_writer.write_lines(fs_tree.stream_tree_representation())
                except BrokenPipeError:
                    pass  # SafeWriter will automatically close in the context manager

        if args.summary:
            counts = {
                "directories": fs_tree.get_directory_count(),
                "files": fs_tree.get_file_count(),
            }
            print(format_counts(counts), file=sys.stderr)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()

"""Command-line interface for devtools-app.

This module provides the command-line entry point. It parses arguments, runs the
requested command through the same command functions the desktop frontend uses,
and turns failures into messages on stderr and exit codes.

Exit Codes:
    0: Successful completion
    1: Runtime error (path not found, not a directory, unreadable directory,
       no folder selected, folder dialog unavailable)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Render a directory with its files
    $ devtools-app tree -f /path/to/dir

    # Display version information
    $ devtools-app --version
"""

import argparse
import logging
import sys
from typing import List, Optional

from devtools_app import commands
from devtools_app.cli.argparser import create_parser, validate_args
from devtools_app.cli.safe_writer import SafeWriter
from devtools_app.cli.signal_handler import setup_signal_handling, signal_handler
from devtools_app.exceptions import CommandError, DirectoryTreeError
from devtools_app.tree_text import build_filtered_tree_text, find_node, parse_tree_text, toggle_node

logger = logging.getLogger(__name__)

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the number of -v flags."""
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbosity, logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def prune_tree_text(text: str, rel_paths: List[str]) -> str:
    """Remove the entries at ``rel_paths`` (and their subtrees) from tree text.

    Args:
        text: Rendered tree text.
        rel_paths: '/'-separated entry paths relative to the tree's root.

    Returns:
        The reduced tree text.

    Raises:
        ValueError: If a path does not name an entry of the tree.
    """
    roots = parse_tree_text(text)
    for rel_path in rel_paths:
        node = find_node(roots, rel_path)
        if node is None or node.level == 0:
            raise ValueError(f"No such entry in tree: {rel_path}")
        if node.is_active:
            toggle_node(node)
    return build_filtered_tree_text(roots)


def run_tree(args: argparse.Namespace) -> str:
    directory = commands.open_folder_dialog() if args.browse else args.directory
    text: str = commands.invoke("read_directory_tree", {"path": directory, "includeFiles": args.include_files})
    if args.prune:
        logger.info("Pruning %s", ", ".join(args.prune))
        text = prune_tree_text(text, args.prune)
    return text


def run_command(args: argparse.Namespace) -> str:
    """Run the selected subcommand and return the text to print."""
    if args.command == "tree":
        return run_tree(args)
    if args.command == "greet":
        return f"{commands.invoke('hello_world', {'name': args.name})}\n"
    if args.command == "pick":
        return f"{commands.invoke('open_folder_dialog')}\n"
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the devtools-app command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose)

    try:
        output = run_command(args)
        output_file = args.output if getattr(args, "output", None) else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write(output)
            except BrokenPipeError:
                pass  # SafeWriter closes itself on leaving the block

    except (DirectoryTreeError, CommandError, ValueError, OSError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()

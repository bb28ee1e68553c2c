"""Command-line argument parsing for devtools-app.

This module defines the command-line interface for devtools-app,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from devtools_app import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance with the tree, greet and pick subcommands.
    """
    description = """
    devtools-app: backend commands of the developer tools desktop application.

    Renders directory structures as tree text in the style of the Unix 'tree'
    command, with directories listed before files and each group sorted by name.
    The same commands the desktop frontend invokes are available here.
    """

    epilog = """
    Examples:
      # Directory structure only
      devtools-app tree /path/to/project

      # Include files, paths copied with quotes are accepted
      devtools-app tree -f '"/path/to/my project"'

      # Leave out a subtree and save the result
      devtools-app tree -f -p node_modules -p src/vendor -o tree.txt /path/to/project

      # Choose the directory with the native folder picker
      devtools-app tree -b

      # Greeting and folder picker
      devtools-app greet Ada
      devtools-app pick

      # Display version information and exit
      devtools-app -V
    """

    parser = argparse.ArgumentParser(
        prog="devtools-app",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"devtools-app {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat (-vv) for debug output.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    tree_parser = subparsers.add_parser("tree", help="Render a directory as tree text.")
    tree_parser.add_argument(
        "directory",
        nargs="?",
        help="The directory to render. Surrounding quote characters are removed.",
    )
    tree_parser.add_argument(
        "-f",
        "--include-files",
        action="store_true",
        help="List files as well as directories.",
    )
    tree_parser.add_argument(
        "-b",
        "--browse",
        action="store_true",
        help="Choose the directory with the native folder picker.",
    )
    tree_parser.add_argument(
        "-p",
        "--prune",
        metavar="REL_PATH",
        action="append",
        default=[],
        help=(
            "Leave out the entry at this '/'-separated path relative to the directory, along "
            "with everything below it (can be specified multiple times)."
        ),
    )
    tree_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    greet_parser = subparsers.add_parser("greet", help="Print a greeting.")
    greet_parser.add_argument("name", nargs="?", help="Who to greet.")

    subparsers.add_parser("pick", help="Open the folder picker and print the selected path.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.command == "tree":
        if args.browse and args.directory:
            raise ValueError("-b/--browse cannot be combined with a directory argument")
        if not args.browse and not args.directory:
            raise ValueError("a directory is required unless -b/--browse is given")

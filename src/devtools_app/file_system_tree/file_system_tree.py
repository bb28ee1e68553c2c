"""File system tree representation with ASCII-art rendering.

This module provides the FileSystemTree class, which reads a directory hierarchy
into a tree of FileSystemNode objects and renders it the way the Unix 'tree'
command does, along with the render_tree() convenience function used by the
frontend command layer.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from anytree import PreOrderIter

from devtools_app.file_system_tree.directory_entry import order_entries, read_entries
from devtools_app.file_system_tree.file_system_node import FileSystemNode
from devtools_app.file_system_tree.render_context import RenderContext
from devtools_app.path_validator import strip_quotes, validate_directory
from devtools_app.types import PathType

logger = logging.getLogger(__name__)


class FileSystemTree:
    """A tree representation of a directory structure.

    The tree is built lazily on first access by a depth-first walk that reads every
    directory once. Within each directory, subdirectories are listed before files and
    each group is sorted by name; files are left out entirely unless ``include_files``
    is set. Each node records the prefix and connector it is drawn with, so rendering
    is a plain pre-order iteration over the nodes.

    Error Handling:
        The root path is validated before the walk starts. Any failure to read a
        directory, at any depth, aborts the whole build with DirectoryReadError;
        partial trees are never produced.

    Attributes:
        root_path (Path): The root directory, with surrounding quotes removed.
        include_files (bool): Whether file entries are part of the tree.

    Example:
        >>> tree = FileSystemTree("project", include_files=True)  # doctest: +SKIP
        >>> print(tree.get_tree_representation(), end="")  # doctest: +SKIP
        project
        ├── docs
        ├── src
        └── README.md
    """

    def __init__(self, root_path: PathType, include_files: bool = False) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory. Strings may be wrapped in quotes.
            include_files: Whether to list files as well as directories.
                Defaults to False.
        """
        self._raw_path = os.fspath(root_path)
        self.root_path = Path(strip_quotes(self._raw_path))
        self.include_files = include_files
        self._tree: Optional[FileSystemNode] = None

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if needed.

        Returns:
            The root node. Its name is empty when the root path has no base name.

        Raises:
            PathNotFoundError: If the root path doesn't exist.
            PathNotADirectoryError: If the root path isn't a directory.
            DirectoryReadError: If any directory in the hierarchy cannot be read.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        root_path = validate_directory(self._raw_path)
        root = FileSystemNode(self._root_name(root_path), is_dir=True, full_path=root_path)
        self._create_children(root, root_path, RenderContext("", self.include_files))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built tree for %s: %d directories, %d files",
                root_path,
                self._count(root, directories=True),
                self._count(root, directories=False),
            )
        return root

    @staticmethod
    def _root_name(path: Path) -> str:
        """Base name for the root line; empty for filesystem roots such as '/'."""
        if path.name in ("", ".", ".."):
            return path.resolve().name
        return path.name

    def _create_children(self, node: FileSystemNode, directory: Path, context: RenderContext) -> None:
        """Read ``directory`` and attach its ordered entries to ``node``, recursing into subdirectories."""
        entries = order_entries(read_entries(directory), context.include_files)

        for index, entry in enumerate(entries):
            is_last = index == len(entries) - 1
            child = FileSystemNode(
                entry.name,
                parent=node,
                is_dir=entry.is_directory,
                full_path=entry.full_path,
                prefix=context.prefix,
                connector=context.connector(is_last),
            )
            if entry.is_directory:
                self._create_children(child, entry.full_path, context.for_child(is_last))

    @staticmethod
    def _count(root: FileSystemNode, directories: bool) -> int:
        return sum(1 for node in root.descendants if node.is_dir == directories)

    def get_file_count(self) -> int:
        """Get the number of files in the tree (always 0 unless include_files is set)."""
        return self._count(self.get_tree(), directories=False)

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        return self._count(self.get_tree(), directories=True)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        The first line is the root directory's name (omitted when it has none),
        followed by one line per entry in depth-first order.

        Yields:
            Lines of the tree representation, without trailing newlines.

        Raises:
            PathNotFoundError: If the root path doesn't exist.
            PathNotADirectoryError: If the root path isn't a directory.
            DirectoryReadError: If any directory in the hierarchy cannot be read.

        Example:
            >>> tree = FileSystemTree("a", include_files=True)  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            a
            └── b
                └── c.txt
        """
        root = self.get_tree()
        for node in PreOrderIter(root):
            if node.is_root:
                if node.name:
                    yield node.name
            else:
                yield node.line

    def get_tree_representation(self) -> str:
        """Get the complete tree representation, each line terminated by a newline.

        Raises:
            PathNotFoundError: If the root path doesn't exist.
            PathNotADirectoryError: If the root path isn't a directory.
            DirectoryReadError: If any directory in the hierarchy cannot be read.
        """
        return "".join(f"{line}\n" for line in self.stream_tree_representation())


def render_tree(path: PathType, include_files: bool = False) -> str:
    """Render the directory at ``path`` as tree text.

    Args:
        path: Directory to render. Strings may be wrapped in quote characters.
        include_files: Whether to list files as well as directories.

    Returns:
        The complete tree text.

    Raises:
        PathNotFoundError: If the path doesn't exist.
        PathNotADirectoryError: If the path isn't a directory.
        DirectoryReadError: If any directory in the hierarchy cannot be read.
    """
    return FileSystemTree(path, include_files=include_files).get_tree_representation()

"""Node representation for file system elements in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a directory flag, the entry's full path, and the
    drawing state computed during traversal: the inherited indentation prefix
    and the connector glyph for the node's position among its siblings.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        full_path (Optional[Path]): Location of the entry on disk.
        prefix (str): Indentation inherited from the ancestors' positions.
        connector (str): Connector glyph, empty for the root node.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root, connector="└── ")
        >>> child.line
        '└── file.txt'
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        full_path: Optional[Path] = None,
        prefix: str = "",
        connector: str = "",
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            full_path: Location of the entry on disk. Defaults to None.
            prefix: Indentation inherited from ancestors. Defaults to "".
            connector: Connector glyph drawn before the name. Defaults to "".
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.full_path = full_path
        self.prefix = prefix
        self.connector = connector

    @property
    def line(self) -> str:
        """The node's rendered line, without a trailing newline."""
        return f"{self.prefix}{self.connector}{self.name}"

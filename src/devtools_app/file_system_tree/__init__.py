"""Directory tree traversal and ASCII-art rendering.

This package reads a directory hierarchy into a tree of nodes, ordered and
filtered for display, and renders it in the style of the Unix 'tree' command.
"""

from .file_system_tree import FileSystemTree, render_tree

__all__ = ["FileSystemTree", "render_tree"]

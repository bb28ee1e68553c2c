"""Parsing rendered tree text back into nodes for interactive pruning.

The frontend shows a rendered tree, lets the user switch individual entries off,
and copies the reduced tree to the clipboard. This module provides the same
round trip on the backend: parse the text produced by FileSystemTree into
TreeLineNode objects, toggle nodes, and rebuild the text from the active ones.
Prefixes and connectors are kept verbatim from the input, so a pruned tree keeps
the drawing of the full one.
"""

import re
from typing import Any, List, Optional, Sequence

from anytree import Node

from devtools_app.file_system_tree.render_context import CONTINUATION_CONNECTOR, TERMINAL_CONNECTOR

_CONNECTOR_HEADS = (CONTINUATION_CONNECTOR.rstrip(), TERMINAL_CONNECTOR.rstrip())
_PREFIX_RE = re.compile(r"^[\s│]*")
_CONNECTOR_RE = re.compile(r"[├└]──\s*")

# Columns per indentation level in rendered tree text
INDENT_WIDTH = 4


class TreeLineNode(Node):  # type: ignore
    """One line of parsed tree text.

    Attributes:
        name (str): Entry name with indentation and connector removed.
        level (int): Depth of the line; 0 for lines without a connector.
        prefix (str): Leading indentation exactly as it appeared in the text.
        connector (str): Connector glyph exactly as it appeared, empty at level 0.
        is_directory (bool): Guess based on the name, see looks_like_directory().
        is_active (bool): Whether the line is kept when the text is rebuilt.
    """

    def __init__(
        self,
        name: str,
        level: int,
        prefix: str = "",
        connector: str = "",
        is_directory: bool = False,
        is_active: bool = True,
        parent: Optional["TreeLineNode"] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.level = level
        self.prefix = prefix
        self.connector = connector
        self.is_directory = is_directory
        self.is_active = is_active

    @property
    def line(self) -> str:
        return f"{self.prefix}{self.connector}{self.name}"


def looks_like_directory(name: str) -> bool:
    """Guess whether a name from tree text refers to a directory.

    Rendered text carries no type information, so names without an extension (or
    with a trailing separator) are treated as directories.

    Example:
        >>> looks_like_directory("src")
        True
        >>> looks_like_directory("README.md")
        False
    """
    return "." not in name or name.endswith("/") or name.endswith("\\")


def _line_level(line: str) -> int:
    positions = [line.find(head) for head in _CONNECTOR_HEADS if head in line]
    if not positions:
        return 0
    return min(positions) // INDENT_WIDTH + 1


def _extract_prefix(line: str) -> str:
    match = _PREFIX_RE.match(line)
    return match.group(0) if match else ""


def _extract_connector(line: str) -> str:
    match = _CONNECTOR_RE.search(line)
    return match.group(0) if match else ""


def _extract_name(line: str) -> str:
    return _CONNECTOR_RE.sub("", line[len(_extract_prefix(line)) :], count=1).strip()


def parse_tree_text(text: str) -> List[TreeLineNode]:
    """Parse tree text into nodes.

    Blank lines are skipped. Each line's parent is the closest preceding line with a
    smaller level; lines without such a parent are returned as top-level nodes.

    Args:
        text: Tree text as produced by FileSystemTree.get_tree_representation().

    Returns:
        The top-level nodes. For a rendered tree with a root line this is a single
        node whose descendants are the entries.

    Example:
        >>> roots = parse_tree_text("project\\n├── docs\\n└── src\\n    └── main.py\\n")
        >>> [node.name for node in roots[0].children]
        ['docs', 'src']
        >>> roots[0].children[1].children[0].level
        2
    """
    roots: List[TreeLineNode] = []
    stack: List[TreeLineNode] = []

    for line in text.splitlines():
        if not line.strip():
            continue

        level = _line_level(line)
        name = _extract_name(line)
        node = TreeLineNode(
            name,
            level,
            prefix=_extract_prefix(line) if level else "",
            connector=_extract_connector(line),
            is_directory=looks_like_directory(name),
        )

        while stack and stack[-1].level >= level:
            stack.pop()

        if stack:
            node.parent = stack[-1]
        else:
            roots.append(node)

        stack.append(node)

    return roots


def toggle_node(node: TreeLineNode) -> None:
    """Flip a node's active state and give all its descendants the new state."""
    node.is_active = not node.is_active
    for descendant in node.descendants:
        descendant.is_active = node.is_active


def find_node(roots: Sequence[TreeLineNode], rel_path: str) -> Optional[TreeLineNode]:
    """Find a node by its '/'-separated path relative to the tree's root line.

    An empty path returns the root line itself. When the text has no root line
    (the tree of a filesystem root), the path starts at the top-level nodes.

    Example:
        >>> roots = parse_tree_text("project\\n└── src\\n    └── main.py\\n")
        >>> find_node(roots, "src/main.py").level
        2
        >>> find_node(roots, "missing") is None
        True
    """
    if not roots:
        return None

    has_root_line = roots[0].level == 0
    parts = [part for part in rel_path.strip("/").split("/") if part]
    if not parts:
        return roots[0] if has_root_line else None

    candidates: Sequence[TreeLineNode] = roots[0].children if has_root_line else roots
    node: Optional[TreeLineNode] = None
    for part in parts:
        node = next((child for child in candidates if child.name == part), None)
        if node is None:
            return None
        candidates = node.children
    return node


def _active_lines(nodes: Sequence[TreeLineNode]) -> List[str]:
    lines: List[str] = []
    for node in nodes:
        if node.is_active:
            lines.append(node.line)
            lines.extend(_active_lines(node.children))
    return lines


def build_filtered_tree_text(roots: Sequence[TreeLineNode]) -> str:
    """Rebuild tree text from the active nodes.

    The first top-level node is the tree's root line and is always kept; inactive
    nodes are dropped together with their whole subtree.

    Returns:
        The reduced tree text, each line terminated by a newline.
    """
    lines: List[str] = []
    if roots and roots[0].level == 0:
        lines.append(roots[0].name)
        lines.extend(_active_lines(roots[0].children))
        lines.extend(_active_lines(roots[1:]))
    else:
        lines.extend(_active_lines(roots))
    return "".join(f"{line}\n" for line in lines)

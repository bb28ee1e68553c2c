"""Per-level drawing state threaded through the directory walk."""

from typing import NamedTuple

TERMINAL_CONNECTOR = "└── "
CONTINUATION_CONNECTOR = "├── "
BLANK_INDENT = "    "
CONTINUATION_INDENT = "│   "


class RenderContext(NamedTuple):
    """Indentation prefix and inclusion policy for one level of the walk.

    Attributes:
        prefix: Accumulated indentation for entries at this level.
        include_files: Whether file entries are listed. Never changes during a walk.

    Example:
        >>> root = RenderContext("", include_files=True)
        >>> root.connector(is_last=False)
        '├── '
        >>> root.for_child(is_last=False).for_child(is_last=True).prefix
        '│       '
    """

    prefix: str
    include_files: bool

    def connector(self, is_last: bool) -> str:
        """Return the connector glyph for an entry at this level."""
        return TERMINAL_CONNECTOR if is_last else CONTINUATION_CONNECTOR

    def for_child(self, is_last: bool) -> "RenderContext":
        """Return the context for the children of an entry at this level.

        The prefix always extends the current one: blank indentation below the last
        entry of a listing, a vertical continuation line below any other entry.
        """
        indent = BLANK_INDENT if is_last else CONTINUATION_INDENT
        return RenderContext(self.prefix + indent, self.include_files)

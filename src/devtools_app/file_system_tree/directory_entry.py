"""Reading and ordering the immediate children of a directory."""

import logging
import os
from pathlib import Path
from typing import Iterable, List, NamedTuple

from devtools_app.exceptions import DirectoryReadError

logger = logging.getLogger(__name__)


class DirectoryEntry(NamedTuple):
    """One child entry discovered while reading a directory.

    Attributes:
        name: The entry's base name.
        is_directory: Whether the entry is a directory (symlinks are followed).
        full_path: Path used to recurse into the entry.
    """

    name: str
    is_directory: bool
    full_path: Path


def read_entries(directory: Path) -> List[DirectoryEntry]:
    """Read the immediate children of a directory.

    Args:
        directory: The directory to enumerate.

    Returns:
        The entries in the order the operating system reports them.

    Raises:
        DirectoryReadError: If the directory cannot be enumerated for any reason
            (permission denied, I/O error, directory removed mid-walk).
    """
    logger.debug("Reading directory %s", directory)
    try:
        with os.scandir(directory) as it:
            return [DirectoryEntry(entry.name, entry.is_dir(), Path(entry.path)) for entry in it]
    except OSError as e:
        raise DirectoryReadError(str(directory), e.strerror or str(e)) from e


def order_entries(entries: Iterable[DirectoryEntry], include_files: bool) -> List[DirectoryEntry]:
    """Filter and order entries for display.

    Directories come first, then files; each group is sorted by name in codepoint
    order. Files are dropped entirely when ``include_files`` is false.

    Example:
        >>> entries = [
        ...     DirectoryEntry("README.md", False, Path("README.md")),
        ...     DirectoryEntry("src", True, Path("src")),
        ...     DirectoryEntry("docs", True, Path("docs")),
        ... ]
        >>> [e.name for e in order_entries(entries, include_files=True)]
        ['docs', 'src', 'README.md']
        >>> [e.name for e in order_entries(entries, include_files=False)]
        ['docs', 'src']
    """
    kept = [entry for entry in entries if include_files or entry.is_directory]
    return sorted(kept, key=lambda entry: (not entry.is_directory, entry.name))

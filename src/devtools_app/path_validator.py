"""Normalization and validation of directory paths received from the frontend.

Paths pasted into the frontend (or copied from a file manager) frequently arrive
wrapped in quote characters. They are stripped here before the path is checked,
while error messages keep the string exactly as the caller supplied it.
"""

import errno
import logging
import os
import stat
from pathlib import Path

from devtools_app.exceptions import DirectoryReadError, PathNotADirectoryError, PathNotFoundError
from devtools_app.types import PathType

logger = logging.getLogger(__name__)

QUOTE_CHARACTERS = "\"'"


def strip_quotes(raw: str) -> str:
    """Remove leading and trailing quote characters from a path string.

    Args:
        raw: The path string as received.

    Returns:
        The string without surrounding quotes. Inner quotes are left untouched.

    Example:
        >>> strip_quotes('"/home/user/My Project"')
        '/home/user/My Project'
        >>> strip_quotes("it's")
        "it's"
    """
    return raw.strip(QUOTE_CHARACTERS)


def validate_directory(raw: PathType) -> Path:
    """Turn a raw path into a path confirmed to exist and to be a directory.

    No normalization beyond quote stripping is performed; symlinks are not resolved.

    Args:
        raw: Path string (possibly quoted) or path-like object.

    Returns:
        The validated directory path.

    Raises:
        PathNotFoundError: If nothing exists at the path.
        PathNotADirectoryError: If the path exists but is not a directory.
        DirectoryReadError: If the path cannot be inspected for another reason
            (a name that is too long, a parent directory that cannot be searched).

    Example:
        >>> validate_directory('"."')
        PosixPath('.')
        >>> validate_directory("/nonexistent")
        Traceback (most recent call last):
        ...
        devtools_app.exceptions.PathNotFoundError: Path does not exist: /nonexistent
    """
    original = os.fspath(raw)
    stripped = strip_quotes(original)
    # Path("") would silently mean the current directory
    if not stripped:
        raise PathNotFoundError(original)
    path = Path(stripped)

    try:
        mode = path.stat().st_mode
    except OSError as e:
        if e.errno in (errno.ENOENT, errno.ENOTDIR):
            raise PathNotFoundError(original) from e
        raise DirectoryReadError(original, e.strerror or str(e)) from e
    except ValueError as e:
        # Embedded NUL characters cannot name any filesystem entry
        raise PathNotFoundError(original) from e

    if not stat.S_ISDIR(mode):
        raise PathNotADirectoryError(original)

    logger.debug("Validated directory %s", path)
    return path

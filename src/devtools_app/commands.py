"""Commands exposed to the desktop frontend.

Each command is a plain function registered in COMMANDS under the name the
frontend invokes it by. invoke() dispatches a call coming from the frontend,
translating its camelCase argument names, and logs any failure before
re-raising it so the frontend receives the error message unchanged.
"""

import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional

from devtools_app import folder_dialog
from devtools_app.exceptions import UnknownCommandError
from devtools_app.file_system_tree import render_tree

logger = logging.getLogger(__name__)

DEFAULT_GREETING_NAME = "stranger"

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def hello_world(name: Optional[str] = None) -> str:
    """Return a greeting for ``name``, or for a stranger when no name is given.

    Example:
        >>> hello_world("Ada")
        'Hello, Ada! 👋'
        >>> hello_world()
        'Hello, stranger! 👋'
    """
    user = name if name is not None else DEFAULT_GREETING_NAME
    return f"Hello, {user}! 👋"


def read_directory_tree(path: str, include_files: bool = False) -> str:
    """Render the directory at ``path`` as tree text.

    Raises:
        PathNotFoundError: If the path doesn't exist.
        PathNotADirectoryError: If the path isn't a directory.
        DirectoryReadError: If any directory in the hierarchy cannot be read.
    """
    return render_tree(path, include_files=include_files)


def open_folder_dialog() -> str:
    """Let the user pick a folder and return its path.

    Raises:
        NoFolderSelectedError: If the user cancels the dialog.
        FolderDialogError: If the dialog cannot be shown.
    """
    return folder_dialog.open_folder_dialog()


COMMANDS: Dict[str, Callable[..., Any]] = {
    "hello_world": hello_world,
    "read_directory_tree": read_directory_tree,
    "open_folder_dialog": open_folder_dialog,
}


def to_snake_case(name: str) -> str:
    """Convert a camelCase argument name to snake_case.

    Example:
        >>> to_snake_case("includeFiles")
        'include_files'
        >>> to_snake_case("path")
        'path'
    """
    return _CAMEL_BOUNDARY_RE.sub("_", name).lower()


def invoke(command: str, args: Optional[Mapping[str, Any]] = None) -> Any:
    """Dispatch a frontend command.

    Args:
        command: Registered command name.
        args: Keyword arguments using the frontend's camelCase names.

    Returns:
        Whatever the command returns.

    Raises:
        UnknownCommandError: If no command is registered under ``command``.
        Exception: Any error raised by the command itself, unchanged.
    """
    handler = COMMANDS.get(command)
    if handler is None:
        raise UnknownCommandError(command)

    kwargs = {to_snake_case(key): value for key, value in (args or {}).items()}
    logger.info("Invoking %s", command)
    try:
        return handler(**kwargs)
    except Exception:
        logger.error("Command %s failed", command, exc_info=True)
        raise

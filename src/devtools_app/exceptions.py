class DirectoryTreeError(Exception):
    """
    Base class for failures while validating or rendering a directory tree.

    Catching this class covers every error the tree rendering operation can raise, so
    callers that only need to show a message to the user can handle all of them at once.
    """

    pass


class PathNotFoundError(DirectoryTreeError):
    """
    Exception raised when the supplied path does not resolve to any filesystem entry.

    Attributes:
        path (str): The path exactly as supplied by the caller, quote characters included.

    Example:
        >>> error = PathNotFoundError('"/nonexistent"')
        >>> str(error)
        'Path does not exist: "/nonexistent"'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the path that could not be found.

        Args:
            path (str): The original path string supplied by the caller.
        """
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class PathNotADirectoryError(DirectoryTreeError):
    """
    Exception raised when the supplied path exists but does not name a directory.

    Attributes:
        path (str): The path exactly as supplied by the caller, quote characters included.

    Example:
        >>> error = PathNotADirectoryError("/etc/hosts")
        >>> str(error)
        'Path is not a directory: /etc/hosts'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (str): The original path string supplied by the caller.
        """
        self.path = path
        super().__init__(f"Path is not a directory: {path}")


class DirectoryReadError(DirectoryTreeError):
    """
    Exception raised when a directory cannot be inspected or its children cannot
    be enumerated, at any depth.

    A single failure aborts the whole traversal; no partial tree is returned. The
    underlying ``OSError`` is available as ``__cause__``.

    Attributes:
        path (str): The directory whose contents could not be read.
        reason (str): Description of the underlying I/O failure.

    Example:
        >>> error = DirectoryReadError("/root/secret", "Permission denied")
        >>> str(error)
        'Failed to read directory /root/secret: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read directory {path}: {reason}")


class CommandError(Exception):
    """Base class for failures raised by the frontend command layer."""

    pass


class UnknownCommandError(CommandError):
    """
    Exception raised when the frontend invokes a command that is not registered.

    Attributes:
        command (str): The requested command name.
    """

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unknown command: {command}")


class NoFolderSelectedError(CommandError):
    """
    Exception raised when the user closes the folder picker without choosing a folder.

    Example:
        >>> str(NoFolderSelectedError())
        'No folder selected'
    """

    def __init__(self, message: str = "No folder selected") -> None:
        super().__init__(message)


class FolderDialogError(CommandError):
    """
    Exception raised when the native folder picker cannot be shown.

    This happens when no display is available or the Tk bindings are missing.

    Attributes:
        reason (str): Description of the failure.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unable to open the folder dialog: {reason}")

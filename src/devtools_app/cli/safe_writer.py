"""Signal-aware output for the devtools-app CLI.

Tree text goes either to a file named on the command line or to the stdout
descriptor. Writes stop with BrokenPipeError as soon as the reader has gone
away or the user pressed Ctrl+C.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, TextIO, Type, Union

from devtools_app.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text to a file descriptor or a file, honouring received signals.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The descriptor actually written to.
    """

    def __init__(self, file: Union[int, str, "os.PathLike[str]"]) -> None:
        """Open the output.

        Args:
            file: An already open file descriptor (such as stdout's), or a path to
                create or truncate.
        """
        self.file = file
        self._closed = False
        self._file_obj: Optional[TextIO]

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write ``data`` encoded as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            OSError: On any other I/O failure.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        try:
            os.write(self.fd, data.encode("utf-8"))
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Close the file if this writer opened it; descriptors passed in are left open."""
        if self._closed:
            return

        try:
            if self._file_obj is not None:
                self._file_obj.close()
        except OSError as e:
            if e.errno != errno.EPIPE:
                raise
        finally:
            self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence
            if exc_type is None:
                raise

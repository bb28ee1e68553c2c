"""Native folder picker used to choose the directory to render."""

import logging

from devtools_app.exceptions import FolderDialogError, NoFolderSelectedError

logger = logging.getLogger(__name__)


def open_folder_dialog(title: str = "Select a folder") -> str:
    """Show a native directory chooser and return the selected folder.

    A hidden Tk root window owns the dialog and is destroyed once the dialog closes.

    Args:
        title: Title of the dialog window.

    Returns:
        The selected folder path.

    Raises:
        NoFolderSelectedError: If the user cancels the dialog.
        FolderDialogError: If the dialog cannot be shown (no display, Tk missing).
    """
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError as e:
        raise FolderDialogError(str(e)) from e

    try:
        root = tkinter.Tk()
    except tkinter.TclError as e:
        raise FolderDialogError(str(e)) from e

    try:
        root.withdraw()
        root.attributes("-topmost", True)
        selected = filedialog.askdirectory(parent=root, title=title, mustexist=True)
    except tkinter.TclError as e:
        raise FolderDialogError(str(e)) from e
    finally:
        root.destroy()

    # askdirectory returns "" (or an empty tuple on some platforms) on cancel
    if not selected:
        logger.info("Folder dialog closed without a selection")
        raise NoFolderSelectedError()

    logger.info("Folder selected: %s", selected)
    return str(selected)

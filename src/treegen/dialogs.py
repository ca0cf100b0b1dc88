"""Native directory chooser."""

import tkinter as tk
from pathlib import Path
from tkinter import filedialog
from typing import Optional

from treegen.exceptions import DirectoryPickerError


def pick_directory(title: str = "Select a folder", parent: Optional[tk.Misc] = None) -> Optional[Path]:
    """Open the native directory chooser.

    When no parent window is given, a hidden root window is created for the
    duration of the dialog.

    Args:
        title: Title of the dialog window.
        parent: Existing window to attach the dialog to. Defaults to None.

    Returns:
        The chosen directory as an absolute path, or None if the dialog was cancelled.

    Raises:
        DirectoryPickerError: If no display is available to show the dialog.
    """
    owner = parent
    if owner is None:
        try:
            owner = tk.Tk()
        except tk.TclError as e:
            raise DirectoryPickerError(str(e)) from e
        owner.withdraw()

    try:
        chosen = filedialog.askdirectory(parent=owner, title=title, mustexist=True)
    finally:
        if parent is None:
            owner.destroy()

    if not chosen:
        return None
    return Path(chosen).absolute()

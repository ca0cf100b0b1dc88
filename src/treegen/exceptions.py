class ClipboardError(Exception):
    """
    Exception raised when the rendered tree cannot be placed on the system clipboard.

    The host clipboard failure is opaque; the underlying exception is kept as the
    cause so callers can inspect it if needed. No retry is attempted.

    Example:
        >>> error = ClipboardError("No clipboard mechanism available")
        >>> str(error)
        'Clipboard unavailable: No clipboard mechanism available'
    """

    def __init__(self, message: str = "Could not copy to clipboard.") -> None:
        """
        Initialize the exception with a description of the clipboard failure.

        Args:
            message (str, optional): Reason reported by the clipboard backend.
                Defaults to "Could not copy to clipboard."
        """
        self.reason = message
        super().__init__(f"Clipboard unavailable: {message}")


class DirectoryPickerError(Exception):
    """
    Exception raised when the native directory chooser cannot be shown.

    This is typically the case on headless systems where no display is available.
    A cancelled dialog is not an error; it is reported as ``None`` by the picker.

    Example:
        >>> error = DirectoryPickerError("no display name and no $DISPLAY environment variable")
        >>> str(error)
        'Directory chooser unavailable: no display name and no $DISPLAY environment variable'
    """

    def __init__(self, message: str) -> None:
        self.reason = message
        super().__init__(f"Directory chooser unavailable: {message}")

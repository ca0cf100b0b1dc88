"""System clipboard access for exporting rendered trees."""

import pyperclip

from treegen.exceptions import ClipboardError


def copy_to_clipboard(text: str) -> None:
    """Place text on the system clipboard.

    Args:
        text: The text to copy, typically a rendered tree diagram.

    Raises:
        ClipboardError: If no clipboard mechanism is available or the copy fails.
            The failure is not retried.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(str(e)) from e

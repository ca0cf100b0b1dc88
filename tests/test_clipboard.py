"""Unit tests for clipboard export."""

from unittest.mock import patch

import pyperclip
import pytest

from treegen.clipboard import copy_to_clipboard
from treegen.exceptions import ClipboardError


def test_copy_to_clipboard():
    with patch("treegen.clipboard.pyperclip.copy") as mock_copy:
        copy_to_clipboard("root\n|__ a.txt\n")
    mock_copy.assert_called_once_with("root\n|__ a.txt\n")


def test_copy_to_clipboard_failure():
    failure = pyperclip.PyperclipException("could not find a copy/paste mechanism")
    with patch("treegen.clipboard.pyperclip.copy", side_effect=failure):
        with pytest.raises(ClipboardError) as excinfo:
            copy_to_clipboard("root\n")
    assert excinfo.value.__cause__ is failure
    assert "could not find a copy/paste mechanism" in str(excinfo.value)

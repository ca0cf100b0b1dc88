"""Signal-aware output writing for the treegen CLI.

Diagram lines are made of file names. On POSIX a file name is an arbitrary byte
string, and names that are not valid UTF-8 reach Python as str with lone
surrogates (PEP 383). The writer encodes with the "surrogateescape" handler so
those names are written back out as the exact bytes found on disk.
"""

import errno
import os
import types
from typing import Iterable, Optional, Type, Union

from treegen.cli.signal_handler import signal_handler
from treegen.types import PathType

ENCODING = "utf-8"
FILENAME_ERRORS = "surrogateescape"

_OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)


class SafeWriter:
    """Writes diagram output to a descriptor or file with unbuffered os.write calls.

    A closed pipe shows up on the write that hits it as BrokenPipeError, and
    once SIGPIPE or SIGINT has been recorded further writes are refused the same
    way, so the caller can stop streaming the diagram.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.
        errors: Codec error handler used when encoding text.
    """

    def __init__(self, file: Union[int, PathType], errors: str = FILENAME_ERRORS):
        """Initialize the writer.

        Args:
            file: A file descriptor owned by the caller, or a path that is created
                or truncated and owned by the writer.
            errors: Codec error handler for encoding. Defaults to "surrogateescape",
                which reproduces undecodable file name bytes unchanged.

        Raises:
            TypeError: If file is neither an int nor path-like.
            OSError: If the output file cannot be opened.
        """
        if isinstance(file, int):
            fd, owns_fd = file, False
        elif isinstance(file, (str, os.PathLike)):
            fd, owns_fd = os.open(file, _OPEN_FLAGS, 0o666), True
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

        self.file = file
        self.fd = fd
        self.errors = errors
        self._owns_fd = owns_fd
        self._closed = False

    def encode(self, data: str) -> bytes:
        """Encode text for output using the writer's error handler."""
        return data.encode(ENCODING, self.errors)

    def write(self, data: str) -> None:
        """Write a string to the output.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT has been received, or the pipe is closed.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted():
            raise BrokenPipeError()

        try:
            os.write(self.fd, self.encode(data))
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each string of an iterable in turn, e.g. a streamed diagram."""
        for line in lines:
            self.write(line)

    def close(self) -> None:
        """Close the descriptor if the writer opened it.

        The writer is marked closed even when closing reports a broken pipe.
        """
        if self._closed:
            return
        self._closed = True

        if self._owns_fd:
            try:
                os.close(self.fd)
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        # An exception from the with block wins over one raised while closing.
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise

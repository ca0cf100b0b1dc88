"""Signal handling for the treegen CLI.

SIGPIPE (output pipe closed, e.g. when piping into `head`) and SIGINT (Ctrl+C)
are recorded rather than raised, so output can stop cleanly and the process can
exit with the conventional status for the signal.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

EXIT_SIGPIPE = 141
EXIT_SIGINT = 130


class SignalHandler:
    """Records SIGPIPE and SIGINT so the CLI can wind down gracefully.

    Each handler restores the original handler after the first signal, so a
    second Ctrl+C falls back to the default behaviour.

    Attributes:
        sigpipe_received: Event set when SIGPIPE has been received.
        sigint_received: Event set when SIGINT has been received.
        original_sigpipe_handler: SIGPIPE handler in place before setup.
        original_sigint_handler: SIGINT handler in place before setup.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status matching the received signal, or None if none was received.

        SIGPIPE takes precedence over SIGINT.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE and SIGINT handlers."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Registered with atexit to keep the interpreter from reporting errors while
    flushing a closed pipe at shutdown.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)

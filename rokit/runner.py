"""Running a child program that can be interrupted by signals."""

from __future__ import annotations

import os
import signal
import subprocess
import threading
from typing import Iterable, Union

# A run stopped by a signal exits with 128 plus the signal number, which
# makes it clear that the program was interrupted rather than failing.
EXIT_CODE_GOT_SIGNAL = 128

_StrPath = Union[str, "os.PathLike[str]"]


def _listened_signals() -> list[signal.Signals]:
    if os.name == "nt":
        return [signal.SIGINT]
    return [signal.SIGINT, signal.SIGTERM, signal.SIGQUIT]


def run_interruptible(command: _StrPath, args: Iterable[_StrPath] = ()) -> int:
    """Run ``command`` with ``args`` and return its exit code.

    SIGINT, SIGTERM and SIGQUIT (only SIGINT on Windows) kill the child, and
    the result is then 128 plus the signal number. A child that ends without
    an exit code counts as exit code 1. Raises ``OSError`` if the command
    cannot be started.
    """
    argv = [os.fspath(command), *(os.fspath(a) for a in args)]
    received: list[int] = []
    child: subprocess.Popen[bytes] | None = None

    def _on_signal(signum: int, _frame: object) -> None:
        received.append(signum)
        if child is not None and child.poll() is None:
            child.kill()

    previous: dict[signal.Signals, object] = {}
    in_main_thread = threading.current_thread() is threading.main_thread()
    try:
        if in_main_thread:
            for sig in _listened_signals():
                previous[sig] = signal.signal(sig, _on_signal)
        child = subprocess.Popen(argv)
        if received:
            child.kill()
        returncode = child.wait()
    finally:
        if child is not None and child.poll() is None:
            child.kill()
            child.wait()
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)

    if received:
        return EXIT_CODE_GOT_SIGNAL + int(received[0])
    return returncode if returncode >= 0 else 1
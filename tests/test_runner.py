import os
import signal
import sys
import threading

import pytest

from rokit.runner import EXIT_CODE_GOT_SIGNAL, run_interruptible


def test_returns_child_exit_code():
    assert run_interruptible(sys.executable, ["-c", "import sys; sys.exit(3)"]) == 3


def test_returns_zero_on_success():
    assert run_interruptible(sys.executable, ["-c", "pass"]) == 0


def test_accepts_generator_args():
    args = (a for a in ["-c", "import sys; sys.exit(5)"])
    assert run_interruptible(sys.executable, args) == 5


def test_missing_command_raises():
    with pytest.raises(OSError):
        run_interruptible("definitely-not-a-real-command-xyz", [])


def test_signal_handlers_are_restored():
    before = signal.getsignal(signal.SIGINT)
    code = run_interruptible(sys.executable, ["-c", "pass"])
    assert code == 0
    assert signal.getsignal(signal.SIGINT) is before


def test_interrupt_kills_child_and_reports_signal():
    timer = threading.Timer(0.5, os.kill, (os.getpid(), signal.SIGINT))
    timer.start()
    try:
        code = run_interruptible(sys.executable, ["-c", "import time; time.sleep(30)"])
    finally:
        timer.cancel()
    assert code == EXIT_CODE_GOT_SIGNAL + int(signal.SIGINT)
"""Detecting what kind of process started this program."""

from __future__ import annotations

import csv
import os
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum


class Launcher(Enum):
    """A graphical launcher that may have started the program."""

    WINDOWS_EXPLORER = "windows_explorer"
    MACOS_FINDER = "macos_finder"


@dataclass(frozen=True)
class Parent:
    """The detected parent: a launcher, or a terminal when ``launcher`` is None."""

    launcher: Launcher | None = None

    def is_launcher(self) -> bool:
        """Return True if the parent is a launcher."""
        return self.launcher is not None

    def is_terminal(self) -> bool:
        """Return True if the parent is a terminal."""
        return self.launcher is None


def _windows_parent_image_name() -> str | None:
    """Return the executable name of the parent process on Windows."""
    try:
        result = subprocess.run(
            ["tasklist", "/FI", f"PID eq {os.getppid()}", "/FO", "CSV", "/NH"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None
    for row in csv.reader(result.stdout.splitlines()):
        if row:
            return row[0]
    return None


def try_detect_launcher() -> Launcher | None:
    """Return the launcher that started this program, if one can be detected."""
    if sys.platform != "win32":
        return None
    image_name = _windows_parent_image_name()
    if image_name is not None and image_name.lower() == "explorer.exe":
        return Launcher.WINDOWS_EXPLORER
    return None


def _is_tty(stream: object) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def detect_parent() -> Parent | None:
    """Detect the parent process kind, or return None if it is unknown."""
    launcher = try_detect_launcher()
    if launcher is not None:
        return Parent(launcher)
    if _is_tty(sys.stdout) or _is_tty(sys.stderr):
        return Parent()
    return None
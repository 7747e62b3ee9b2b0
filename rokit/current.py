"""Information about the currently running process, cached on first use."""

from __future__ import annotations

import functools
import os
import sys
from pathlib import Path

_EXE_SUFFIX = ".exe" if os.name == "nt" else ""


@functools.lru_cache(maxsize=None)
def current_dir() -> Path:
    """Return the working directory as it was on the first call."""
    return Path.cwd()


@functools.lru_cache(maxsize=None)
def current_exe() -> Path:
    """Return the resolved path of the program that is running."""
    if sys.argv and sys.argv[0]:
        candidate = Path(sys.argv[0])
        if candidate.is_file():
            return candidate.resolve()
    if sys.executable:
        return Path(sys.executable).resolve()
    raise RuntimeError("Failed to get path to current executable")


@functools.lru_cache(maxsize=None)
def current_exe_contents() -> bytes:
    """Return the bytes of the running program."""
    return current_exe().read_bytes()


def exe_name_from_arg0(arg0: str, exe_suffix: str = _EXE_SUFFIX) -> str:
    """Return the file name in ``arg0`` without the executable suffix.

    The suffix is stripped when written either fully lowercase or fully
    uppercase, since some shells pass it in either form.
    """
    name = Path(arg0).name
    if name in ("", ".", ".."):
        raise ValueError(f"Invalid file name passed as arg0: {arg0!r}")
    if not exe_suffix:
        return name
    for suffix in (exe_suffix.lower(), exe_suffix.upper()):
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name


@functools.lru_cache(maxsize=None)
def current_exe_name() -> str:
    """Return the name this program was started under, without its suffix."""
    if not sys.argv:
        raise RuntimeError("Missing arg0")
    return exe_name_from_arg0(sys.argv[0], _EXE_SUFFIX)
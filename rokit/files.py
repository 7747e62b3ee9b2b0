"""File helpers for loading, saving and writing executables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, TypeVar, Union

T = TypeVar("T")
PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

_EXE_SUFFIX = ".exe" if os.name == "nt" else ""


class MissingFileError(FileNotFoundError):
    """Raised when a file that must be loaded does not exist."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        super().__init__(f"file not found: {self.path}")


def load_from_file(path: PathLike, parser: Callable[[str], T]) -> T:
    """Read the file at ``path`` and parse its text with ``parser``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MissingFileError(path) from e
    return parser(text)


def save_to_file(path: PathLike, data: object) -> None:
    """Write the string form of ``data`` to the file at ``path``."""
    Path(path).write_text(str(data), encoding="utf-8")


def path_exists(path: PathLike) -> bool:
    """Return True if the path exists and can be accessed."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def write_executable_file(path: PathLike, contents: bytes) -> None:
    """Write ``contents`` to ``path`` and mark the file as executable."""
    path = Path(path)
    if _EXE_SUFFIX and path.suffix != _EXE_SUFFIX:
        _log.warning(
            "An executable file was written without an executable extension!"
            "\nThe file at %r may not be usable.",
            str(path),
        )
    try:
        path.write_bytes(contents)
    except OSError as e:
        _log.error("Failed to write executable to %r:\n%s", str(path), e)
        raise
    if os.name != "nt":
        try:
            path.chmod(0o755)
        except OSError as e:
            _log.error("Failed to set executable permissions on %r:\n%s", str(path), e)
            raise


def _simplify_windows(path: str) -> str:
    """Strip the verbatim ``\\\\?\\`` prefix from a Windows path where it is safe."""
    if path.startswith("\\\\?\\UNC\\"):
        return "\\\\" + path[len("\\\\?\\UNC\\"):]
    if path.startswith("\\\\?\\"):
        rest = path[len("\\\\?\\"):]
        if len(rest) >= 3 and rest[0].isalpha() and rest[1:3] == ":\\":
            return rest
    return path


def simplify_path(path: PathLike) -> Path:
    """Return the path without a Windows verbatim prefix; unchanged elsewhere."""
    if os.name == "nt":
        return Path(_simplify_windows(os.fspath(path)))
    return Path(path)
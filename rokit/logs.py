"""Logging setup for the command-line interface."""

from __future__ import annotations

import logging
import os
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_ENV_VAR = "ROKIT_LOG"

_OFF = logging.CRITICAL + 10

_LEVEL_NAMES = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": _OFF,
}

# Chatty libraries are held at INFO so debugging output stays readable.
_QUIET_LOGGERS = ("urllib3", "httpx", "httpcore", "asyncio")

_HANDLER_MARK = "_rokit_handler"


def level_for_verbosity(verbose: int) -> int:
    """Map a count of ``-v`` flags to a logging level."""
    if verbose <= 0:
        return logging.INFO
    if verbose == 1:
        return logging.DEBUG
    return TRACE


def _parse_level(text: str) -> int | None:
    return _LEVEL_NAMES.get(text.strip().lower())


def _parse_directives(spec: str) -> tuple[int | None, dict[str, int]]:
    """Parse ``level`` and ``target=level`` directives, skipping invalid ones."""
    default: int | None = None
    targets: dict[str, int] = {}
    for directive in spec.split(","):
        directive = directive.strip()
        if not directive:
            continue
        target, sep, level_text = directive.partition("=")
        if sep:
            level = _parse_level(level_text)
            if level is not None and target.strip():
                targets[target.strip()] = level
        else:
            level = _parse_level(directive)
            if level is not None:
                default = level
    return default, targets


def init_logging(default_level: int | str = logging.INFO) -> int:
    """Send log records to stderr, filtered by ``ROKIT_LOG`` or ``default_level``.

    Returns the level set on the root logger.
    """
    if isinstance(default_level, str):
        parsed = _parse_level(default_level)
        if parsed is None:
            raise ValueError(f"unknown log level '{default_level}'")
        default_level = parsed

    env_default, targets = _parse_directives(os.environ.get(LOG_ENV_VAR, ""))
    level = env_default if env_default is not None else default_level

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)5s %(message)s"))
    setattr(handler, _HANDLER_MARK, True)
    root.addHandler(handler)
    root.setLevel(level)

    for name, target_level in targets.items():
        logging.getLogger(name).setLevel(target_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    return level
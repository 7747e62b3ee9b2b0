"""Helpers for validating tool identifier parts and normalising versions."""

from __future__ import annotations

_FORBIDDEN = frozenset(":/@")


def to_xyz_version(v_str: str) -> str:
    """Expand an ``x.y`` version (with optional pre-release/build) to ``x.y.0``."""
    cut = min((i for i in (v_str.find("-"), v_str.find("+")) if i >= 0), default=len(v_str))
    number_part, rest = v_str[:cut], v_str[cut:]
    if number_part.count(".") == 1:
        return f"{number_part}.0{rest}"
    return v_str


def is_invalid_identifier(s: str) -> bool:
    """Return True if the string is empty, only whitespace, or holds a separator."""
    return not s or s.isspace() or any(c in _FORBIDDEN for c in s)